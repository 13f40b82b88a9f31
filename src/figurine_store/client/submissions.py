"""Order and contact form submission."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from figurine_store.client.api_client import StorefrontApi
from figurine_store.client.notifications import NotificationBus
from figurine_store.client.uploads import UploadedPhoto
from figurine_store.client.validation import (
    CONTACT_FIELDS,
    validate_contact_form,
    validate_order_form,
)
from figurine_store.domain.contact import CONFIRMATION_TEXT
from figurine_store.domain.orders import ORDER_FIELD_LIMITS

logger = logging.getLogger(__name__)


@dataclass
class OrderSubmitter:
    """Pre-validates the order form and submits it with the uploaded photo."""

    api: StorefrontApi
    notifications: NotificationBus
    is_submitting: bool = False

    async def submit(
        self, form: Mapping[str, str], photo: UploadedPhoto | None
    ) -> str | None:
        """Submit an order and return its id, or ``None`` if it was not placed."""
        errors = validate_order_form(form)
        if errors:
            self.notifications.error(next(iter(errors.values())))
            return None
        if photo is None:
            self.notifications.error("Photo information is missing")
            return None
        if self.is_submitting:
            return None

        order_details = {name: form[name].strip() for name in ORDER_FIELD_LIMITS}
        self.is_submitting = True
        try:
            result = await self.api.create_order(order_details, photo.key, photo.url)
        except httpx.HTTPError as exc:
            logger.warning("Order submission failed: %s", exc)
            self.notifications.error("An error occurred while processing your order")
            return None
        finally:
            self.is_submitting = False

        if result.success and result.order_id:
            self.notifications.success(
                f"Order created successfully! Order ID: {result.order_id}"
            )
            return result.order_id
        self.notifications.error(result.error or "Failed to create order")
        return None


@dataclass
class ContactSubmitter:
    """Pre-validates and submits the contact form."""

    api: StorefrontApi
    notifications: NotificationBus
    is_submitting: bool = False

    async def submit(self, form: Mapping[str, str]) -> str | None:
        """Submit a contact message and return its id on success."""
        errors = validate_contact_form(form)
        if errors:
            self.notifications.error(next(iter(errors.values())))
            return None
        if self.is_submitting:
            return None

        values = {name: form[name].strip() for name in CONTACT_FIELDS}
        self.is_submitting = True
        try:
            result = await self.api.submit_contact_message(**values)
        except httpx.HTTPError as exc:
            logger.warning("Contact submission failed: %s", exc)
            self.notifications.error("Failed to send message. Please try again later.")
            return None
        finally:
            self.is_submitting = False

        if result.success and result.message_id:
            self.notifications.success(result.message or CONFIRMATION_TEXT, 5000)
            return result.message_id
        self.notifications.error(
            result.error or "Failed to send message. Please try again later."
        )
        return None
