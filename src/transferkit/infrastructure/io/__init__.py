"""IO utilities package."""

from transferkit.infrastructure.io.downloader import FileDownloader
from transferkit.infrastructure.io.uploader import S3Uploader

__all__ = ["FileDownloader", "S3Uploader"]
