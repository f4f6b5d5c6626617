"""Domain exceptions for file transfers."""


class TransferKitError(Exception):
    """Base exception for all transferkit errors."""
    pass


class InvalidLocationError(TransferKitError, ValueError):
    """Raised when a storage URL cannot be parsed into a bucket reference."""
    pass


class UnsupportedSourceError(TransferKitError):
    """Raised when a URL scheme is not recognized."""
    pass


class ConfigurationError(TransferKitError):
    """Raised when configuration is invalid."""
    pass
