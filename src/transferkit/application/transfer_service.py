"""Transfer service wiring downloader, uploader and temp storage together."""

from pathlib import Path
from typing import List, Optional

from transferkit.domain.models import DownloadResult, UploadResult
from transferkit.domain.protocols import IDownloader, ITempStorage, IUploader
from transferkit.infrastructure.config import TransferSettings
from transferkit.infrastructure.io import FileDownloader, S3Uploader
from transferkit.infrastructure.storage import S3ObjectStore, TempStorage
from transferkit.shared.logging import get_logger
from transferkit.shared.types import PathLike

logger = get_logger(__name__)


class TransferService:
    """
    Entry point for file transfers.

    Collaborators are injected so callers (and tests) can swap transports;
    use ``from_settings`` to build the default stack.
    """

    def __init__(
        self,
        downloader: IDownloader,
        uploader: IUploader,
        temp_storage: ITempStorage
    ):
        self.downloader = downloader
        self.uploader = uploader
        self.temp_storage = temp_storage

    @classmethod
    def from_settings(cls, settings: Optional[TransferSettings] = None) -> 'TransferService':
        """
        Build a service from settings.

        The temp root is resolved here, once, and emptied when
        ``clear_temp_on_start`` is set.
        """
        settings = settings or TransferSettings()

        object_store = S3ObjectStore(chunk_size=settings.chunk_size)
        temp_storage = TempStorage(settings.temp_dir)
        if settings.clear_temp_on_start:
            temp_storage.clear()

        return cls(
            downloader=FileDownloader(
                timeout=settings.http_timeout,
                chunk_size=settings.chunk_size,
                object_store=object_store
            ),
            uploader=S3Uploader(checksum=settings.checksum, object_store=object_store),
            temp_storage=temp_storage
        )

    def download_file(self, url: str, local_path: PathLike) -> DownloadResult:
        """Download url (http(s):// or s3://) to local_path."""
        return self.downloader.download(url, Path(local_path))

    def upload_file(
        self,
        local_path: PathLike,
        url: str,
        content_type: Optional[str] = None
    ) -> UploadResult:
        """Upload local_path to the s3:// url."""
        return self.uploader.upload(Path(local_path), url, content_type)

    def upload_folder(self, local_folder: PathLike, url: str) -> List[UploadResult]:
        """Upload the files directly inside local_folder under url."""
        return self.uploader.upload_folder(Path(local_folder), url)

    def get_temp_folder(self) -> Path:
        return self.temp_storage.get_temp_folder()

    def get_temp_path(self, relative_path: PathLike) -> Path:
        return self.temp_storage.get_temp_path(relative_path)
