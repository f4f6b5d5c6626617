"""Protocol definitions for dependency inversion."""

from typing import Protocol, List, Optional
from pathlib import Path

from .models import UploadResult, DownloadResult


class IDownloader(Protocol):
    """Interface for downloading files."""

    def download(self, url: str, destination: Path) -> DownloadResult:
        """Download a file from URL to destination."""
        ...

    def supports(self, url: str) -> bool:
        """Check if this downloader supports the given URL."""
        ...


class IUploader(Protocol):
    """Interface for uploading files to object storage."""

    def upload(self, file_path: Path, url: str, content_type: Optional[str] = None) -> UploadResult:
        """Upload a file to the bucket/key named by url."""
        ...

    def upload_folder(self, folder: Path, url: str) -> List[UploadResult]:
        """Upload every file directly inside folder under url."""
        ...


class ITempStorage(Protocol):
    """Interface for managing the scratch directory."""

    def get_temp_folder(self) -> Path:
        """Return the temp root."""
        ...

    def get_temp_path(self, relative_path: str) -> Path:
        """Return a path under the temp root, creating the root if needed."""
        ...

    def clear(self) -> None:
        """Remove everything under the temp root."""
        ...
