"""Order validation and persistence."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from urllib.parse import urlsplit

from figurine_store.domain.errors import InvalidRequestError
from figurine_store.domain.orders import (
    MIN_PHONE_DIGITS,
    ORDER_FIELD_LIMITS,
    ORDER_STATUS_PENDING,
    OrderDetails,
    OrderRecord,
)
from figurine_store.services.identifiers import new_order_id, utc_now
from figurine_store.services.payloads import parse_json_object

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_NON_DIGITS = re.compile(r"\D")


class OrderRepository(Protocol):
    """Persistence interface for orders."""

    def create_order(self, order: OrderRecord) -> None:
        """Persist a single order row."""

    def get_order(self, order_id: str) -> OrderRecord | None:
        """Return an order by id, if present."""

    def list_orders_by_email(self, email: str) -> list[OrderRecord]:
        """Return orders placed with an email address, newest first."""


@dataclass
class OrderService:
    """Validates order submissions and writes one record per submission.

    Validation is fail-fast in a fixed sequence: payload size, presence of the
    top-level fields, the customer fields, the photo key and then the photo
    URL. Nothing is written unless every step passes.
    """

    repository: OrderRepository
    folder_prefix: str
    bucket_host: str
    max_payload_bytes: int = 10 * 1024
    clock: Callable[[], datetime] = field(default=utc_now)

    def submit(self, raw_body: bytes) -> OrderRecord:
        """Validate a raw request body and persist the order it describes."""
        if len(raw_body) > self.max_payload_bytes:
            raise InvalidRequestError(
                f"Request body exceeds {self.max_payload_bytes} bytes"
            )
        return self.create_order(parse_json_object(raw_body))

    def create_order(self, payload: dict[str, object]) -> OrderRecord:
        """Validate a decoded submission and persist it."""
        order_details = payload.get("orderDetails")
        photo_key = payload.get("photoS3Key")
        photo_url = payload.get("photoS3Url")
        if (
            not isinstance(order_details, dict)
            or not order_details
            or not isinstance(photo_key, str)
            or not photo_key
            or not isinstance(photo_url, str)
            or not photo_url
        ):
            raise InvalidRequestError("Missing order details or photo info")

        details = validate_order_details(order_details)
        validate_photo_key(photo_key, self.folder_prefix)
        validate_photo_url(photo_url, photo_key, self.bucket_host)

        now = self.clock()
        # Status is always server-assigned; any client-supplied value is dropped.
        order = OrderRecord(
            order_id=new_order_id(now),
            details=details,
            photo_s3_key=photo_key,
            photo_s3_url=photo_url,
            status=ORDER_STATUS_PENDING,
            created_at=now,
            updated_at=now,
        )
        self.repository.create_order(order)
        logger.info("Created order %s for photo %s", order.order_id, photo_key)
        return order

    def get_order(self, order_id: str) -> OrderRecord | None:
        """Return a stored order by id."""
        return self.repository.get_order(order_id)

    def list_orders_by_email(self, email: str) -> list[OrderRecord]:
        """Return stored orders for an email address."""
        return self.repository.list_orders_by_email(email.strip())


def validate_order_details(order_details: dict[str, object]) -> OrderDetails:
    """Validate the customer field set and return trimmed values."""
    unknown = sorted(name for name in order_details if name not in ORDER_FIELD_LIMITS)
    if unknown:
        raise InvalidRequestError(f"Unknown order field: {unknown[0]}")

    cleaned: dict[str, str] = {}
    for name, max_length in ORDER_FIELD_LIMITS.items():
        value = order_details.get(name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidRequestError(f"{name} is required")
        value = value.strip()
        if len(value) > max_length:
            raise InvalidRequestError(
                f"{name} must be at most {max_length} characters"
            )
        if name == "email" and not EMAIL_PATTERN.match(value):
            raise InvalidRequestError("Invalid email format")
        if name == "phone" and len(_NON_DIGITS.sub("", value)) < MIN_PHONE_DIGITS:
            raise InvalidRequestError(
                f"Phone number must contain at least {MIN_PHONE_DIGITS} digits"
            )
        cleaned[name] = value

    return OrderDetails(
        full_name=cleaned["fullName"],
        email=cleaned["email"],
        phone=cleaned["phone"],
        street_address=cleaned["streetAddress"],
        city=cleaned["city"],
        state=cleaned["state"],
        zip_code=cleaned["zipCode"],
    )


def validate_photo_key(photo_key: str, folder_prefix: str) -> None:
    """Ensure the key lives under the upload folder and was minted by presign."""
    pattern = re.compile(rf"{re.escape(folder_prefix)}[0-9]+-[A-Za-z0-9._-]+")
    if (
        not photo_key.startswith(folder_prefix)
        or ".." in photo_key
        or "//" in photo_key
        or not pattern.fullmatch(photo_key)
    ):
        raise InvalidRequestError("Invalid photo key")


def validate_photo_url(photo_url: str, photo_key: str, bucket_host: str) -> None:
    """Ensure the URL is an https URL for ``photo_key`` in the configured bucket."""
    parts = urlsplit(photo_url)
    if parts.scheme != "https":
        raise InvalidRequestError("Photo URL must use https")
    if (parts.hostname or "") != bucket_host.lower() or parts.port is not None:
        raise InvalidRequestError("Photo URL must reference the configured bucket")
    if parts.path != f"/{photo_key}" or parts.query or parts.fragment:
        raise InvalidRequestError("Photo URL does not match photo key")
