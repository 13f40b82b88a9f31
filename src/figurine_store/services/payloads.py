"""Request body decoding."""

import json

from figurine_store.domain.errors import InvalidRequestError


def parse_json_object(raw: bytes | str) -> dict[str, object]:
    """Decode a JSON request body that must be an object.

    An empty body is treated as an empty object so that presence checks
    produce the field-level error message instead of a decoding error.
    """
    if not raw or not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidRequestError("Request body must be valid JSON") from exc
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return payload
