"""Supabase-backed order repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from figurine_store.domain.orders import OrderDetails, OrderRecord
from figurine_store.services.orders import OrderRepository


@dataclass
class SupabaseOrderRepository(OrderRepository):
    """Supabase implementation for order persistence."""

    client: Client
    table_name: str = "orders"

    def create_order(self, order: OrderRecord) -> None:
        """Insert one order row."""
        details = order.details
        response = (
            self.client.table(self.table_name)
            .insert(
                {
                    "order_id": order.order_id,
                    "full_name": details.full_name,
                    "email": details.email,
                    "phone": details.phone,
                    "street_address": details.street_address,
                    "city": details.city,
                    "state": details.state,
                    "zip_code": details.zip_code,
                    "photo_s3_key": order.photo_s3_key,
                    "photo_s3_url": order.photo_s3_url,
                    "status": order.status,
                    "created_at": order.created_at.isoformat(),
                    "updated_at": order.updated_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create order")

    def get_order(self, order_id: str) -> OrderRecord | None:
        """Return an order by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("order_id", order_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _row_to_order(response.data[0])

    def list_orders_by_email(self, email: str) -> list[OrderRecord]:
        """Return orders for an email address, newest first."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("email", email)
            .order("created_at", desc=True)
            .execute()
        )
        return [_row_to_order(row) for row in response.data or []]


def _row_to_order(row: dict[str, object]) -> OrderRecord:
    return OrderRecord(
        order_id=str(row["order_id"]),
        details=OrderDetails(
            full_name=str(row["full_name"]),
            email=str(row["email"]),
            phone=str(row["phone"]),
            street_address=str(row["street_address"]),
            city=str(row["city"]),
            state=str(row["state"]),
            zip_code=str(row["zip_code"]),
        ),
        photo_s3_key=str(row["photo_s3_key"]),
        photo_s3_url=str(row["photo_s3_url"]),
        status=str(row["status"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
