"""File uploader implementations."""

import base64
import hashlib
import mimetypes
from pathlib import Path
from typing import List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from transferkit.domain.exceptions import UnsupportedSourceError
from transferkit.domain.locations import TransportKind, join_url, parse_location
from transferkit.domain.models import UploadResult
from transferkit.infrastructure.storage.s3_store import S3ObjectStore
from transferkit.shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = 'application/octet-stream'


def guess_content_type(file_path: Path) -> str:
    """Infer a MIME type from the file extension."""
    content_type, _ = mimetypes.guess_type(str(file_path))
    return content_type or DEFAULT_CONTENT_TYPE


def content_md5(data: bytes) -> str:
    """Base64-encoded MD5 digest, as sent in the Content-MD5 header."""
    return base64.b64encode(hashlib.md5(data).digest()).decode('ascii')


class S3Uploader:
    """
    Uploader for S3-compatible object storage.
    Implements IUploader protocol.
    """

    def __init__(
        self,
        checksum: bool = True,
        object_store: Optional[S3ObjectStore] = None
    ):
        """
        Initialize uploader.

        Args:
            checksum: Send a Content-MD5 header computed from the file
            object_store: Object store used for the PUT
        """
        self.checksum = checksum
        self._object_store = object_store or S3ObjectStore()
        self._logger = get_logger(__name__)

    def upload(
        self,
        file_path: Path,
        url: str,
        content_type: Optional[str] = None
    ) -> UploadResult:
        """
        Upload a file to the bucket/key named by url.

        Args:
            file_path: Path to file to upload
            url: s3:// destination URL carrying credentials
            content_type: MIME type; inferred from the extension if omitted

        Returns:
            UploadResult with upload details

        Raises:
            UnsupportedSourceError: If url is not an s3:// URL
            botocore.exceptions.ClientError, BotoCoreError: If the PUT fails
        """
        location = parse_location(url)
        if location.kind is not TransportKind.BUCKET:
            raise UnsupportedSourceError(f"Unrecognized upload destination: {url}")
        ref = location.bucket_ref

        file_path = Path(file_path)
        data = file_path.read_bytes()

        if not content_type:
            content_type = guess_content_type(file_path)

        md5 = content_md5(data) if self.checksum else None

        self._logger.info(
            f"Uploading {file_path} ({len(data)} bytes, {content_type}) to {ref}"
        )

        try:
            self._object_store.put_object(ref, data, content_type, content_md5=md5)
        except (ClientError, BotoCoreError) as e:
            self._logger.error(f"Upload of {ref} failed: {e}")
            raise

        self._logger.info(f"Upload successful: {ref.key}")

        return UploadResult(
            success=True,
            bucket=ref.bucket,
            key=ref.key,
            size_bytes=len(data),
            content_type=content_type,
            checksum=md5,
            url=str(ref)
        )

    def upload_folder(self, folder: Path, url: str) -> List[UploadResult]:
        """
        Upload each file directly inside folder to url/<name>.

        Entries are processed one at a time in sorted name order;
        subdirectories are skipped. The first failure propagates and the
        remaining files are not uploaded.

        Returns:
            Upload results in processing order
        """
        folder = Path(folder)
        entries = sorted(folder.iterdir(), key=lambda p: p.name)

        results = []
        for entry in entries:
            if entry.is_dir():
                self._logger.warning(f"Skipping directory {entry}")
                continue
            results.append(self.upload(entry, join_url(url, entry.name)))

        self._logger.info(f"Uploaded {len(results)} files from {folder}")
        return results
