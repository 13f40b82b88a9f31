"""Pydantic models for the storefront JSON API."""

from pydantic import BaseModel, ConfigDict, Field

from figurine_store.domain.contact import ContactMessageRecord
from figurine_store.domain.orders import OrderRecord


class ApiModel(BaseModel):
    """Base model accepting both wire aliases and field names."""

    model_config = ConfigDict(populate_by_name=True)


class PresignRequest(ApiModel):
    """Body of ``POST /presign``."""

    file_name: str = Field(alias="fileName")
    file_type: str = Field(alias="fileType")


class CreateOrderRequest(ApiModel):
    """Body of ``POST /create-order``."""

    order_details: dict[str, str] = Field(alias="orderDetails")
    photo_s3_key: str = Field(alias="photoS3Key")
    photo_s3_url: str = Field(alias="photoS3Url")


class ContactMessageRequest(ApiModel):
    """Body of ``POST /contactMessage``."""

    name: str
    email: str
    phone: str
    message: str


class ApiResponse(ApiModel):
    """Common ``{success, error}`` response envelope."""

    success: bool
    error: str | None = None


class PresignResponse(ApiResponse):
    """Presign result."""

    url: str | None = None
    key: str | None = None
    file_url: str | None = Field(default=None, alias="fileUrl")


class CreateOrderResponse(ApiResponse):
    """Order creation result."""

    order_id: str | None = Field(default=None, alias="orderId")


class ContactMessageResponse(ApiResponse):
    """Contact message result."""

    message_id: str | None = Field(default=None, alias="messageId")
    message: str | None = None


class OrderView(ApiModel):
    """Stored order as returned by the admin API."""

    order_id: str = Field(alias="orderId")
    full_name: str = Field(alias="fullName")
    email: str
    phone: str
    street_address: str = Field(alias="streetAddress")
    city: str
    state: str
    zip_code: str = Field(alias="zipCode")
    photo_s3_key: str = Field(alias="photoS3Key")
    photo_s3_url: str = Field(alias="photoS3Url")
    status: str
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")

    @classmethod
    def from_record(cls, order: OrderRecord) -> "OrderView":
        details = order.details
        return cls(
            order_id=order.order_id,
            full_name=details.full_name,
            email=details.email,
            phone=details.phone,
            street_address=details.street_address,
            city=details.city,
            state=details.state,
            zip_code=details.zip_code,
            photo_s3_key=order.photo_s3_key,
            photo_s3_url=order.photo_s3_url,
            status=order.status,
            created_at=order.created_at.isoformat(),
            updated_at=order.updated_at.isoformat(),
        )


class ContactMessageView(ApiModel):
    """Stored contact message as returned by the admin API."""

    message_id: str = Field(alias="messageId")
    name: str
    email: str
    phone: str
    message: str
    status: str
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_record(cls, record: ContactMessageRecord) -> "ContactMessageView":
        return cls(
            message_id=record.message_id,
            name=record.name,
            email=record.email,
            phone=record.phone,
            message=record.message,
            status=record.status,
            created_at=record.created_at.isoformat(),
        )
