"""Domain models for contact messages."""

from dataclasses import dataclass
from datetime import datetime

CONTACT_STATUS_NEW = "new"
MIN_MESSAGE_LENGTH = 10
MAX_MESSAGE_LENGTH = 1000
CONFIRMATION_TEXT = "Your message has been received. We will get back to you soon!"


@dataclass(frozen=True)
class ContactMessageRecord:
    """Represents a contact message stored in the database."""

    message_id: str
    name: str
    email: str
    phone: str
    message: str
    status: str
    created_at: datetime
