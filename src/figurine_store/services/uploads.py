"""Presigned upload issuance for customer photos."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from figurine_store.domain.errors import InvalidRequestError
from figurine_store.domain.uploads import (
    ALLOWED_IMAGE_TYPES,
    MAX_FILENAME_LENGTH,
    PresignedUpload,
)
from figurine_store.services.identifiers import epoch_millis, utc_now

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class ObjectSigner(Protocol):
    """Interface for issuing object-store write credentials."""

    def generate_put_url(self, key: str, content_type: str, expires_in: int) -> str:
        """Return a URL that allows a single PUT of ``key`` with ``content_type``."""

    def public_url(self, key: str) -> str:
        """Return the public URL the object will have once uploaded."""


@dataclass
class PresignService:
    """Validates upload requests and mints time-boxed write URLs."""

    signer: ObjectSigner
    folder_prefix: str
    expires_in: int = 300
    clock: Callable[[], datetime] = field(default=utc_now)

    def create_upload(self, file_name: object, file_type: object) -> PresignedUpload:
        """Reserve an object key and return a signed upload target for it."""
        name, content_type = validate_presign_request(file_name, file_type)
        key = build_object_key(self.folder_prefix, epoch_millis(self.clock()), name)
        url = self.signer.generate_put_url(key, content_type, self.expires_in)
        logger.info("Issued upload URL for %s (%s)", key, content_type)
        return PresignedUpload(
            url=url,
            key=key,
            file_url=self.signer.public_url(key),
            expires_in=self.expires_in,
        )


def validate_presign_request(file_name: object, file_type: object) -> tuple[str, str]:
    """Return the validated file name and MIME type or raise."""
    if (
        not isinstance(file_name, str)
        or not isinstance(file_type, str)
        or not file_name.strip()
        or not file_type.strip()
    ):
        raise InvalidRequestError("Missing fileName or fileType")
    if len(file_name) > MAX_FILENAME_LENGTH:
        raise InvalidRequestError(
            f"fileName must be at most {MAX_FILENAME_LENGTH} characters"
        )
    if ".." in file_name or "/" in file_name or "\\" in file_name:
        raise InvalidRequestError("fileName must not contain path separators or '..'")
    content_type = file_type.strip().lower()
    if content_type not in ALLOWED_IMAGE_TYPES:
        raise InvalidRequestError(f"Unsupported file type: {file_type}")
    return file_name.strip(), content_type


def sanitize_filename(file_name: str) -> str:
    """Replace characters outside ``[A-Za-z0-9._-]`` with underscores."""
    return _UNSAFE_FILENAME_CHARS.sub("_", file_name)


def build_object_key(folder_prefix: str, timestamp_ms: int, file_name: str) -> str:
    """Return ``<prefix><timestamp>-<sanitized name>``."""
    return f"{folder_prefix}{timestamp_ms}-{sanitize_filename(file_name)}"
