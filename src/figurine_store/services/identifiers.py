"""Identifier and timestamp helpers for persisted records."""

import secrets
import string
from datetime import UTC, datetime

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(tz=UTC)


def epoch_millis(moment: datetime) -> int:
    """Return milliseconds since the Unix epoch for a timezone-aware datetime."""
    return int(moment.timestamp() * 1000)


def random_suffix(length: int = 9) -> str:
    """Return a random lowercase base36 string."""
    return "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(length))


def new_order_id(moment: datetime) -> str:
    """Build an order id such as ``ORDER-1700000000000-K3J9Q0X1Z``."""
    return f"ORDER-{epoch_millis(moment)}-{random_suffix().upper()}"


def new_message_id(moment: datetime) -> str:
    """Build a contact message id such as ``msg_1700000000000_k3j9q0x1z``."""
    return f"msg_{epoch_millis(moment)}_{random_suffix()}"
