"""HTTP/S3 downloader implementation."""

import requests
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from botocore.exceptions import BotoCoreError, ClientError

from transferkit.domain.locations import (
    BUCKET_SCHEMES,
    WEB_SCHEMES,
    Location,
    TransportKind,
    parse_location,
)
from transferkit.domain.models import DownloadResult
from transferkit.infrastructure.storage.s3_store import S3ObjectStore
from transferkit.shared.logging import get_logger

logger = get_logger(__name__)


class FileDownloader:
    """
    Downloads files over HTTP/HTTPS or from S3-compatible buckets.
    Implements IDownloader protocol.
    """

    def __init__(
        self,
        timeout: float = 600,
        chunk_size: int = 8192,
        object_store: Optional[S3ObjectStore] = None
    ):
        """
        Initialize downloader.

        Args:
            timeout: HTTP request timeout in seconds
            chunk_size: Chunk size for streamed bucket reads
            object_store: Object store used for s3:// URLs
        """
        self.timeout = timeout
        self.chunk_size = chunk_size
        self._object_store = object_store or S3ObjectStore(chunk_size=chunk_size)
        self._logger = get_logger(__name__)

        self._handlers = {
            TransportKind.WEB: self._download_from_web,
            TransportKind.BUCKET: self._download_from_bucket,
        }

    def supports(self, url: str) -> bool:
        """Check if URL is supported (http/https/s3)."""
        parsed = urlparse(url)
        return parsed.scheme.lower() in WEB_SCHEMES + BUCKET_SCHEMES

    def download(self, url: str, destination: Path) -> DownloadResult:
        """
        Download file from URL to destination.

        Args:
            url: http(s):// or s3:// URL
            destination: Destination file path; its directory must exist

        Returns:
            DownloadResult describing the written file

        Raises:
            UnsupportedSourceError: If the URL scheme is not recognized
            requests.RequestException: If the HTTP transfer fails
            botocore.exceptions.ClientError, BotoCoreError: If the bucket read fails
        """
        location = parse_location(url)
        destination = Path(destination)
        return self._handlers[location.kind](location, destination)

    def _download_from_web(self, location: Location, destination: Path) -> DownloadResult:
        """Fetch the whole body in one buffered GET and write it to disk."""
        self._logger.info(f"Downloading {location.url} to {destination}")

        try:
            response = requests.get(location.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            self._logger.error(f"Download failed: {e}")
            raise

        data = response.content
        destination.write_bytes(data)

        self._logger.info(f"Downloaded {len(data)} bytes to {destination}")
        return DownloadResult(
            kind=location.kind,
            url=location.url,
            path=destination,
            size_bytes=len(data)
        )

    def _download_from_bucket(self, location: Location, destination: Path) -> DownloadResult:
        """Stream an object from the bucket to disk."""
        ref = location.bucket_ref
        self._logger.info(f"Downloading {ref} to {destination}")

        try:
            written = self._object_store.get_object_to_file(ref, destination)
        except (ClientError, BotoCoreError) as e:
            self._logger.error(f"Download of {ref} failed: {e}")
            raise

        self._logger.info(f"Downloaded {written} bytes to {destination}")
        return DownloadResult(
            kind=location.kind,
            url=location.url,
            path=destination,
            size_bytes=written
        )
