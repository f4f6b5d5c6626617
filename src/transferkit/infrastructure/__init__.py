"""Infrastructure layer package."""

from transferkit.infrastructure.config import ConfigLoader, TransferSettings
from transferkit.infrastructure.io import FileDownloader, S3Uploader
from transferkit.infrastructure.storage import S3ObjectStore, TempStorage

__all__ = [
    "ConfigLoader",
    "TransferSettings",
    "FileDownloader",
    "S3Uploader",
    "S3ObjectStore",
    "TempStorage",
]
