"""Storage infrastructure."""

from transferkit.infrastructure.storage.s3_store import S3ObjectStore, create_s3_client
from transferkit.infrastructure.storage.temp_storage import TempStorage

__all__ = ['S3ObjectStore', 'create_s3_client', 'TempStorage']
