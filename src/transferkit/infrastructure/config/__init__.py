"""Configuration package."""

from transferkit.infrastructure.config.loader import ConfigLoader, TransferSettings, resolve_temp_root

__all__ = ["ConfigLoader", "TransferSettings", "resolve_temp_root"]
