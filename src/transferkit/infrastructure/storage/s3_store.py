"""
S3 object store access.

boto3 (S3-compatible API) behind a tiny surface: one client per call, one
GET streamed to disk or one PUT from memory.
"""

from pathlib import Path
from typing import Callable, Optional

import boto3
from botocore.client import Config

from transferkit.domain.locations import BucketReference
from transferkit.shared.logging import get_logger

logger = get_logger(__name__)


def create_s3_client(ref: BucketReference):
    """Create an S3 client for the credentials and endpoint in ref."""
    config = Config(
        signature_version='s3v4',
        s3={'addressing_style': 'virtual'}
    )

    kwargs = {
        'aws_access_key_id': ref.access_key or None,
        'aws_secret_access_key': ref.secret_key or None,
        'config': config
    }

    if ref.endpoint_url:
        kwargs['endpoint_url'] = ref.endpoint_url

    if ref.region:
        kwargs['region_name'] = ref.region

    return boto3.client('s3', **kwargs)


class S3ObjectStore:
    """
    Reads and writes single objects addressed by a BucketReference.

    Clients are not pooled: every call builds its own from the reference's
    credentials.
    """

    def __init__(self, client_factory: Optional[Callable] = None, chunk_size: int = 8192):
        """
        Initialize object store.

        Args:
            client_factory: Callable building a client from a BucketReference
            chunk_size: Read size when streaming object bodies to disk
        """
        self._client_factory = client_factory or create_s3_client
        self.chunk_size = chunk_size
        self._logger = get_logger(__name__)

    def get_object_to_file(self, ref: BucketReference, destination: Path) -> int:
        """
        Stream an object to a local file.

        Returns:
            Number of bytes written
        """
        client = self._client_factory(ref)
        response = client.get_object(Bucket=ref.bucket, Key=ref.key)
        body = response['Body']

        written = 0
        with open(destination, 'wb') as f:
            for chunk in body.iter_chunks(chunk_size=self.chunk_size):
                if chunk:
                    f.write(chunk)
                    written += len(chunk)

        self._logger.debug(f"Streamed {written} bytes from {ref}")
        return written

    def put_object(
        self,
        ref: BucketReference,
        body: bytes,
        content_type: str,
        content_md5: Optional[str] = None
    ) -> dict:
        """Write body to the bucket/key in ref with a single PUT."""
        client = self._client_factory(ref)

        params = {
            'Bucket': ref.bucket,
            'Key': ref.key,
            'Body': body,
            'ContentType': content_type,
        }
        if content_md5:
            params['ContentMD5'] = content_md5

        return client.put_object(**params)
