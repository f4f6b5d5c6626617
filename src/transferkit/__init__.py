"""
File transfer helpers between local disk, HTTP(S) endpoints and S3-compatible
object storage.

The module-level functions use a default ``TransferService`` built from
``TransferSettings()`` on first use; build your own service to control the
temp root and other settings explicitly.
"""

from pathlib import Path
from typing import List, Optional

from transferkit.application import TransferService
from transferkit.domain import (
    BucketReference,
    ConfigurationError,
    DownloadResult,
    InvalidLocationError,
    Location,
    TransferKitError,
    TransportKind,
    UnsupportedSourceError,
    UploadResult,
    parse_bucket_url,
    parse_location,
)
from transferkit.infrastructure.config import ConfigLoader, TransferSettings
from transferkit.shared.types import PathLike

__version__ = "0.1.0"

_default_service: Optional[TransferService] = None


def get_default_service() -> TransferService:
    """Return the process-wide service, building it on first use."""
    global _default_service
    if _default_service is None:
        _default_service = TransferService.from_settings(ConfigLoader().load())
    return _default_service


def download_file(url: str, local_path: PathLike) -> DownloadResult:
    return get_default_service().download_file(url, local_path)


def upload_file(local_path: PathLike, url: str, content_type: Optional[str] = None) -> UploadResult:
    return get_default_service().upload_file(local_path, url, content_type)


def upload_folder(local_folder: PathLike, url: str) -> List[UploadResult]:
    return get_default_service().upload_folder(local_folder, url)


def get_temp_folder() -> Path:
    return get_default_service().get_temp_folder()


def get_temp_path(relative_path: PathLike) -> Path:
    return get_default_service().get_temp_path(relative_path)


__all__ = [
    "TransferService",
    "TransferSettings",
    "ConfigLoader",
    "BucketReference",
    "Location",
    "TransportKind",
    "DownloadResult",
    "UploadResult",
    "parse_bucket_url",
    "parse_location",
    "download_file",
    "upload_file",
    "upload_folder",
    "get_temp_folder",
    "get_temp_path",
    "get_default_service",
    "TransferKitError",
    "InvalidLocationError",
    "UnsupportedSourceError",
    "ConfigurationError",
]
