"""Client-side pre-flight validation for files and form fields.

These checks mirror what the storefront forms show inline. They only decide
whether a request is worth sending; the server handlers remain the authority.
"""

import re
from collections.abc import Mapping

from figurine_store.domain.contact import MAX_MESSAGE_LENGTH, MIN_MESSAGE_LENGTH
from figurine_store.domain.orders import MIN_PHONE_DIGITS, ORDER_FIELD_LIMITS
from figurine_store.domain.uploads import ALLOWED_IMAGE_TYPES, MAX_UPLOAD_BYTES

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_NON_DIGITS = re.compile(r"\D")

MIN_ZIP_DIGITS = 5

ORDER_FIELD_LABELS: dict[str, str] = {
    "fullName": "Full Name",
    "email": "Email Address",
    "phone": "Phone Number",
    "streetAddress": "Address",
    "city": "City",
    "state": "State",
    "zipCode": "Pincode",
}

CONTACT_FIELDS = ("name", "email", "phone", "message")


def validate_file(size: int, content_type: str) -> str | None:
    """Return an error message if the file cannot be uploaded."""
    if size > MAX_UPLOAD_BYTES:
        return "File size must be less than 10MB"
    if content_type.lower() not in ALLOWED_IMAGE_TYPES:
        return "Only JPG, PNG, and HEIC formats are supported"
    return None


def _digit_count(value: str) -> int:
    return len(_NON_DIGITS.sub("", value))


def validate_order_field(name: str, value: str) -> str | None:
    """Return the inline error for an order form field, if any."""
    if not value.strip():
        label = ORDER_FIELD_LABELS.get(name)
        return f"{label} is required" if label else "This field is required"
    if name == "email" and not _EMAIL_PATTERN.match(value):
        return "Please enter a valid email address"
    if name == "phone" and _digit_count(value) < MIN_PHONE_DIGITS:
        return "Phone number must be at least 10 digits"
    if name == "zipCode" and _digit_count(value) < MIN_ZIP_DIGITS:
        return "Please enter a valid Pincode/ZIP"
    max_length = ORDER_FIELD_LIMITS.get(name)
    if max_length is not None and len(value.strip()) > max_length:
        return f"{ORDER_FIELD_LABELS[name]} must be at most {max_length} characters"
    return None


def validate_order_form(form: Mapping[str, str]) -> dict[str, str]:
    """Return field -> error for every invalid order field."""
    errors: dict[str, str] = {}
    for name in ORDER_FIELD_LIMITS:
        error = validate_order_field(name, form.get(name, ""))
        if error:
            errors[name] = error
    return errors


def validate_contact_field(name: str, value: str) -> str | None:
    """Return the inline error for a contact form field, if any."""
    if not value.strip():
        return "This field is required"
    if name == "email" and not _EMAIL_PATTERN.match(value):
        return "Please enter a valid email address"
    if name == "phone" and _digit_count(value) < MIN_PHONE_DIGITS:
        return "Phone number must be at least 10 digits"
    if name == "message":
        length = len(value.strip())
        if length < MIN_MESSAGE_LENGTH:
            return f"Message must be at least {MIN_MESSAGE_LENGTH} characters"
        if length > MAX_MESSAGE_LENGTH:
            return f"Message cannot exceed {MAX_MESSAGE_LENGTH} characters"
    return None


def validate_contact_form(form: Mapping[str, str]) -> dict[str, str]:
    """Return field -> error for every invalid contact field."""
    errors: dict[str, str] = {}
    for name in CONTACT_FIELDS:
        error = validate_contact_field(name, form.get(name, ""))
        if error:
            errors[name] = error
    return errors
