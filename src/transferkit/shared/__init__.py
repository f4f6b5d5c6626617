"""Shared utilities package."""

from transferkit.shared.logging import setup_logger, get_logger
from transferkit.shared.types import PathLike

__all__ = [
    "setup_logger",
    "get_logger",
    "PathLike",
]
