"""
Location parsing for transfer URLs.

A URL is resolved once into a ``Location`` tagged with its transport kind.
Bucket URLs use the virtual-host convention:

    s3://ACCESS_KEY:SECRET_KEY@bucket.s3.us-east-1.amazonaws.com/path/to/key

The first host label is the bucket and the remaining labels (plus any port) are
the endpoint host. For s3.<region>.<provider>.<tld> hosts the label after "s3"
is the region.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote, unquote, urlparse

from .exceptions import InvalidLocationError, UnsupportedSourceError

AWS_HOST_SUFFIX = "amazonaws.com"


class TransportKind(str, Enum):
    """Transport used to reach a location."""

    WEB = "web"
    BUCKET = "bucket"


WEB_SCHEMES = ("http", "https")
BUCKET_SCHEMES = ("s3",)


@dataclass(frozen=True)
class BucketReference:
    """Parsed components of an object storage URL."""

    access_key: str
    secret_key: str
    endpoint_host: str
    bucket: str
    key: str
    region: Optional[str] = None

    @property
    def endpoint_url(self) -> Optional[str]:
        """Endpoint URL for the S3 client; None lets boto3 pick the AWS endpoint."""
        host = self.endpoint_host.split(":")[0]
        if not host or host.endswith(AWS_HOST_SUFFIX):
            return None
        return f"https://{self.endpoint_host}"

    def __str__(self) -> str:
        # credentials are never rendered
        return f"s3://{self.bucket}/{self.key}"


@dataclass(frozen=True)
class Location:
    """A URL tagged with the transport that serves it."""

    kind: TransportKind
    url: str
    bucket_ref: Optional[BucketReference] = None


def parse_bucket_url(url: str) -> BucketReference:
    """
    Parse an ``s3://`` URL into a BucketReference.

    Args:
        url: e.g. s3://user:pass@bucket.s3.us-east-1.amazonaws.com/dir/file.txt

    Returns:
        BucketReference with decoded credentials, bucket, region and key

    Raises:
        InvalidLocationError: If the URL is not a well-formed bucket URL
    """
    if not url or not isinstance(url, str):
        raise InvalidLocationError(f"Invalid bucket URL: {url!r}")

    parsed = urlparse(url)
    if parsed.scheme not in BUCKET_SCHEMES:
        raise InvalidLocationError(f"Not a bucket URL: {url}")

    host = parsed.hostname
    if not host:
        raise InvalidLocationError(f"Bucket URL has no host: {url}")

    try:
        port = parsed.port
    except ValueError as e:
        raise InvalidLocationError(f"Bucket URL has an invalid port: {url}") from e

    key = unquote(parsed.path.lstrip("/"))
    if not key:
        raise InvalidLocationError(f"Bucket URL has no object key: {url}")

    labels = host.split(".")
    region = labels[2] if len(labels) >= 5 and labels[1] == "s3" else None

    endpoint_host = ".".join(labels[1:])
    if endpoint_host and port:
        endpoint_host = f"{endpoint_host}:{port}"

    return BucketReference(
        access_key=unquote(parsed.username or ""),
        secret_key=unquote(parsed.password or ""),
        endpoint_host=endpoint_host,
        bucket=labels[0],
        key=key,
        region=region,
    )


def parse_location(url: str) -> Location:
    """
    Resolve a URL to a Location.

    Raises:
        UnsupportedSourceError: If the scheme is neither http(s) nor s3
        InvalidLocationError: If an s3 URL is malformed
    """
    scheme = urlparse(url).scheme.lower() if isinstance(url, str) else ""

    if scheme in WEB_SCHEMES:
        return Location(kind=TransportKind.WEB, url=url)
    if scheme in BUCKET_SCHEMES:
        return Location(kind=TransportKind.BUCKET, url=url, bucket_ref=parse_bucket_url(url))

    raise UnsupportedSourceError(f"Unrecognized source: {url}")


def join_url(url: str, name: str) -> str:
    """Append a percent-encoded path segment to a URL."""
    return f"{url.rstrip('/')}/{quote(name)}"
