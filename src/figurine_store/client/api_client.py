"""Storefront API client adapter."""

import json
from dataclasses import dataclass
from typing import Protocol, TypeVar

import httpx
from pydantic import ValidationError

from figurine_store.api.models import (
    ApiResponse,
    ContactMessageRequest,
    ContactMessageResponse,
    CreateOrderRequest,
    CreateOrderResponse,
    PresignRequest,
    PresignResponse,
)

ResponseT = TypeVar("ResponseT", bound=ApiResponse)


class StorefrontApi(Protocol):
    """Interface for the storefront endpoints and the direct object upload."""

    async def get_presigned_url(self, file_name: str, file_type: str) -> PresignResponse:
        """Request a presigned upload target."""

    async def upload_file(self, url: str, content: bytes, content_type: str) -> None:
        """PUT file bytes to a presigned URL."""

    async def create_order(
        self, order_details: dict[str, str], photo_s3_key: str, photo_s3_url: str
    ) -> CreateOrderResponse:
        """Submit an order."""

    async def submit_contact_message(
        self, name: str, email: str, phone: str, message: str
    ) -> ContactMessageResponse:
        """Submit a contact message."""


@dataclass
class HttpxStorefrontClient(StorefrontApi):
    """Storefront client implemented with httpx.

    Error responses from the handlers carry the same ``{success, error}``
    envelope as successes, so they are parsed rather than raised. Transport
    failures and responses without that envelope raise ``httpx.HTTPError``.
    """

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxStorefrontClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def get_presigned_url(self, file_name: str, file_type: str) -> PresignResponse:
        """Request a presigned upload URL for a file."""
        request = PresignRequest(file_name=file_name, file_type=file_type)
        return await self._post_json(
            "/presign", request.model_dump(by_alias=True), PresignResponse
        )

    async def upload_file(self, url: str, content: bytes, content_type: str) -> None:
        """Upload bytes straight to object storage."""
        response = await self.http_client.put(
            url, content=content, headers={"Content-Type": content_type}, timeout=60
        )
        response.raise_for_status()

    async def create_order(
        self, order_details: dict[str, str], photo_s3_key: str, photo_s3_url: str
    ) -> CreateOrderResponse:
        """Submit an order referencing an uploaded photo."""
        request = CreateOrderRequest(
            order_details=order_details,
            photo_s3_key=photo_s3_key,
            photo_s3_url=photo_s3_url,
        )
        return await self._post_json(
            "/create-order", request.model_dump(by_alias=True), CreateOrderResponse
        )

    async def submit_contact_message(
        self, name: str, email: str, phone: str, message: str
    ) -> ContactMessageResponse:
        """Submit a contact form message."""
        request = ContactMessageRequest(
            name=name, email=email, phone=phone, message=message
        )
        return await self._post_json(
            "/contactMessage", request.model_dump(), ContactMessageResponse
        )

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    async def _post_json(
        self, path: str, payload: dict[str, object], model: type[ResponseT]
    ) -> ResponseT:
        response = await self.http_client.post(
            f"{self.base_url}{path}", json=payload, timeout=15
        )
        try:
            return model.model_validate(unwrap_proxy_response(response.json()))
        except (ValueError, ValidationError) as exc:
            # Gateway errors such as {"message": "Forbidden"} carry no envelope.
            response.raise_for_status()
            raise httpx.DecodingError(
                f"Unexpected response from {path} ({response.status_code})",
                request=response.request,
            ) from exc


def unwrap_proxy_response(data: object) -> object:
    """Return the decoded body of an API Gateway proxy-shaped payload.

    Handlers invoked without a proxy integration answer with
    ``{"statusCode": ..., "body": "<json>"}``; anything else is returned as is.
    """
    if (
        isinstance(data, dict)
        and "statusCode" in data
        and isinstance(data.get("body"), str)
    ):
        return json.loads(data["body"])
    return data
