"""Staged photo upload: validate, presign, PUT, commit."""

import base64
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

import httpx

from figurine_store.client.api_client import StorefrontApi
from figurine_store.client.notifications import NotificationBus
from figurine_store.client.validation import validate_file
from figurine_store.domain.uploads import s3_bucket_host

logger = logging.getLogger(__name__)

mimetypes.add_type("image/heic", ".heic")
mimetypes.add_type("image/heif", ".heif")


@dataclass(frozen=True)
class LocalFile:
    """A file selected by the user."""

    name: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str | Path) -> "LocalFile":
        """Read a file from disk, guessing its MIME type from the extension."""
        file_path = Path(path)
        content_type, _ = mimetypes.guess_type(file_path.name)
        return cls(
            name=file_path.name,
            content_type=content_type or "application/octet-stream",
            content=file_path.read_bytes(),
        )

    def to_data_url(self) -> str:
        """Return a local preview of the file as a base64 data URL."""
        encoded = base64.b64encode(self.content).decode("ascii")
        return f"data:{self.content_type};base64,{encoded}"


@dataclass(frozen=True)
class UploadedPhoto:
    """Committed reference to a photo stored in the object store."""

    file_name: str
    key: str
    url: str
    preview_url: str


@dataclass
class UploadCoordinator:
    """Turns a selected file into a stored object usable by an order.

    A file that passes local validation replaces any committed photo. Every
    stage failure ends the attempt with an error notification and leaves
    ``uploaded`` empty. Nothing is retried.
    """

    api: StorefrontApi
    notifications: NotificationBus
    bucket_name: str | None = None
    region: str | None = None
    uploaded: UploadedPhoto | None = None
    is_uploading: bool = False

    async def upload(self, file: LocalFile) -> UploadedPhoto | None:
        """Validate and upload a file, returning its committed reference."""
        if self.is_uploading:
            self.notifications.warning("An upload is already in progress")
            return None
        error = validate_file(file.size, file.content_type)
        if error:
            self.notifications.error(error)
            return None

        # A new attempt replaces the committed photo even if it fails.
        self.uploaded = None
        preview_url = file.to_data_url()
        self.is_uploading = True
        try:
            photo = await self._upload(file, preview_url)
        except httpx.HTTPStatusError as exc:
            logger.warning("Photo upload rejected: %s", exc)
            self.notifications.error(
                f"Upload failed with status {exc.response.status_code}"
            )
            return None
        except httpx.HTTPError as exc:
            logger.warning("Photo upload failed: %s", exc)
            self.notifications.error("Upload failed")
            return None
        finally:
            self.is_uploading = False

        if photo is None:
            return None
        self.uploaded = photo
        self.notifications.success("Photo uploaded successfully!")
        return photo

    def clear(self) -> None:
        """Forget the committed reference, e.g. after an order is placed."""
        self.uploaded = None

    async def _upload(self, file: LocalFile, preview_url: str) -> UploadedPhoto | None:
        content_type = file.content_type.lower()
        presign = await self.api.get_presigned_url(file.name, content_type)
        if not presign.success or not presign.url or not presign.key:
            self.notifications.error(presign.error or "Failed to get upload URL")
            return None

        file_url = presign.file_url or self._derive_file_url(presign.key)
        if not file_url:
            self.notifications.error("Failed to get upload URL")
            return None

        await self.api.upload_file(presign.url, file.content, content_type)
        return UploadedPhoto(
            file_name=file.name,
            key=presign.key,
            url=file_url,
            preview_url=preview_url,
        )

    def _derive_file_url(self, key: str) -> str | None:
        if not self.bucket_name or not self.region:
            return None
        return f"https://{s3_bucket_host(self.bucket_name, self.region)}/{key}"
