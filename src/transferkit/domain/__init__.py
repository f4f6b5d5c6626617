"""Domain layer package."""

from .models import UploadResult, DownloadResult
from .locations import (
    TransportKind,
    BucketReference,
    Location,
    parse_bucket_url,
    parse_location,
)
from .exceptions import (
    TransferKitError,
    InvalidLocationError,
    UnsupportedSourceError,
    ConfigurationError,
)
from .protocols import IDownloader, IUploader, ITempStorage

__all__ = [
    # Models
    "UploadResult",
    "DownloadResult",
    # Locations
    "TransportKind",
    "BucketReference",
    "Location",
    "parse_bucket_url",
    "parse_location",
    # Exceptions
    "TransferKitError",
    "InvalidLocationError",
    "UnsupportedSourceError",
    "ConfigurationError",
    # Protocols
    "IDownloader",
    "IUploader",
    "ITempStorage",
]
