"""Domain models for photo uploads."""

from dataclasses import dataclass

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
MAX_FILENAME_LENGTH = 255

ALLOWED_IMAGE_TYPES: frozenset[str] = frozenset(
    {"image/jpeg", "image/png", "image/heic", "image/heif"}
)


@dataclass(frozen=True)
class PresignedUpload:
    """A reserved object key with its signed write URL."""

    url: str
    key: str
    file_url: str
    expires_in: int


def s3_bucket_host(bucket: str, region: str) -> str:
    """Return the virtual-hosted S3 host name for a bucket."""
    return f"{bucket}.s3.{region}.amazonaws.com"
