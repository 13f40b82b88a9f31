"""Supabase-backed contact message repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from figurine_store.domain.contact import ContactMessageRecord
from figurine_store.services.contact import ContactMessageRepository


@dataclass
class SupabaseContactMessageRepository(ContactMessageRepository):
    """Supabase implementation for contact message persistence."""

    client: Client
    table_name: str = "contact_messages"

    def create_message(self, message: ContactMessageRecord) -> None:
        """Insert one contact message row."""
        response = (
            self.client.table(self.table_name)
            .insert(
                {
                    "message_id": message.message_id,
                    "name": message.name,
                    "email": message.email,
                    "phone": message.phone,
                    "message": message.message,
                    "status": message.status,
                    "created_at": message.created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save contact message")

    def list_recent(self, limit: int) -> list[ContactMessageRecord]:
        """Return the newest contact messages."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [
            ContactMessageRecord(
                message_id=str(row["message_id"]),
                name=str(row["name"]),
                email=str(row["email"]),
                phone=str(row["phone"]),
                message=str(row["message"]),
                status=str(row["status"]),
                created_at=datetime.fromisoformat(str(row["created_at"])),
            )
            for row in response.data or []
        ]
