"""Application layer package."""

from transferkit.application.transfer_service import TransferService

__all__ = ["TransferService"]
