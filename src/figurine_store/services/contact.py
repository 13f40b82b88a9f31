"""Contact message intake."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from figurine_store.domain.contact import (
    CONTACT_STATUS_NEW,
    MAX_MESSAGE_LENGTH,
    MIN_MESSAGE_LENGTH,
    ContactMessageRecord,
)
from figurine_store.domain.errors import InvalidRequestError
from figurine_store.services.identifiers import new_message_id, utc_now

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone", "message")


class ContactMessageRepository(Protocol):
    """Persistence interface for contact messages."""

    def create_message(self, message: ContactMessageRecord) -> None:
        """Persist a single contact message row."""

    def list_recent(self, limit: int) -> list[ContactMessageRecord]:
        """Return the most recent messages, newest first."""


@dataclass
class ContactService:
    """Validates and stores messages sent through the contact form."""

    repository: ContactMessageRepository
    clock: Callable[[], datetime] = field(default=utc_now)

    def submit(self, payload: dict[str, object]) -> ContactMessageRecord:
        """Validate a contact message payload and persist it."""
        values: dict[str, str] = {}
        for name in CONTACT_FIELDS:
            value = payload.get(name)
            if not isinstance(value, str) or not value.strip():
                raise InvalidRequestError("Missing required fields")
            values[name] = value.strip()

        message_length = len(values["message"])
        if message_length < MIN_MESSAGE_LENGTH:
            raise InvalidRequestError(
                f"Message must be at least {MIN_MESSAGE_LENGTH} characters"
            )
        if message_length > MAX_MESSAGE_LENGTH:
            raise InvalidRequestError(
                f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters"
            )

        now = self.clock()
        record = ContactMessageRecord(
            message_id=new_message_id(now),
            name=values["name"],
            email=values["email"],
            phone=values["phone"],
            message=values["message"],
            status=CONTACT_STATUS_NEW,
            created_at=now,
        )
        self.repository.create_message(record)
        logger.info("Stored contact message %s", record.message_id)
        return record

    def list_recent(self, limit: int = 20) -> list[ContactMessageRecord]:
        """Return recent contact messages."""
        return self.repository.list_recent(max(1, min(limit, 100)))
