"""Domain models for file transfers."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .locations import TransportKind


@dataclass
class UploadResult:
    """Result of a file upload operation."""

    success: bool
    bucket: str = ""
    key: str = ""
    size_bytes: int = 0
    content_type: Optional[str] = None
    checksum: Optional[str] = None
    url: Optional[str] = None


@dataclass
class DownloadResult:
    """Result of a file download operation."""

    kind: TransportKind
    url: str
    path: Path
    size_bytes: int = 0
