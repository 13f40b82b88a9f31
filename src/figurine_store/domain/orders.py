"""Domain models for figurine orders."""

from dataclasses import dataclass
from datetime import datetime

ORDER_STATUS_PENDING = "pending"

# Wire field name -> maximum length, in validation order.
ORDER_FIELD_LIMITS: dict[str, int] = {
    "fullName": 100,
    "email": 254,
    "phone": 20,
    "streetAddress": 200,
    "city": 50,
    "state": 50,
    "zipCode": 10,
}

MIN_PHONE_DIGITS = 10


@dataclass(frozen=True)
class OrderDetails:
    """Validated customer details for an order."""

    full_name: str
    email: str
    phone: str
    street_address: str
    city: str
    state: str
    zip_code: str


@dataclass(frozen=True)
class OrderRecord:
    """Represents an order stored in the database."""

    order_id: str
    details: OrderDetails
    photo_s3_key: str
    photo_s3_url: str
    status: str
    created_at: datetime
    updated_at: datetime
