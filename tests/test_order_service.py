"""Tests for order validation and persistence."""

import json

import pytest

from figurine_store.domain.errors import InvalidRequestError
from figurine_store.domain.orders import ORDER_FIELD_LIMITS
from figurine_store.services.orders import (
    OrderService,
    validate_order_details,
    validate_photo_key,
    validate_photo_url,
)
from tests.conftest import (
    BUCKET_HOST,
    FIXED_NOW,
    FOLDER_PREFIX,
    VALID_ORDER_DETAILS,
    VALID_PHOTO_KEY,
    InMemoryOrderRepository,
    order_payload,
)


def _service(repository: InMemoryOrderRepository) -> OrderService:
    return OrderService(
        repository=repository,
        folder_prefix=FOLDER_PREFIX,
        bucket_host=BUCKET_HOST,
        clock=lambda: FIXED_NOW,
    )


def test_create_order_persists_pending_order(
    order_repository: InMemoryOrderRepository,
) -> None:
    order = _service(order_repository).create_order(order_payload())

    assert order.order_id.startswith("ORDER-1714564800000-")
    assert len(order.order_id.rsplit("-", 1)[1]) == 9
    assert order.status == "pending"
    assert order.created_at == order.updated_at == FIXED_NOW
    assert order.details.full_name == "Asha Rao"
    assert order_repository.orders == {order.order_id: order}


def test_create_order_ignores_client_status(
    order_repository: InMemoryOrderRepository,
) -> None:
    order = _service(order_repository).create_order(order_payload(status="shipped"))

    assert order_repository.orders[order.order_id].status == "pending"


def test_create_order_trims_fields(order_repository: InMemoryOrderRepository) -> None:
    details = dict(VALID_ORDER_DETAILS, city="  Mysuru  ")

    order = _service(order_repository).create_order(
        order_payload(orderDetails=details)
    )

    assert order.details.city == "Mysuru"


@pytest.mark.parametrize("field_name", list(ORDER_FIELD_LIMITS))
def test_create_order_requires_every_field(
    order_repository: InMemoryOrderRepository, field_name: str
) -> None:
    details = dict(VALID_ORDER_DETAILS)
    del details[field_name]

    with pytest.raises(InvalidRequestError, match=f"{field_name} is required"):
        _service(order_repository).create_order(order_payload(orderDetails=details))

    assert order_repository.orders == {}


@pytest.mark.parametrize("missing", ["orderDetails", "photoS3Key", "photoS3Url"])
def test_create_order_requires_top_level_fields(
    order_repository: InMemoryOrderRepository, missing: str
) -> None:
    payload = order_payload()
    del payload[missing]

    with pytest.raises(InvalidRequestError, match="Missing order details"):
        _service(order_repository).create_order(payload)


def test_submit_rejects_oversized_body(
    order_repository: InMemoryOrderRepository,
) -> None:
    payload = order_payload(padding="x" * 11_000)

    with pytest.raises(InvalidRequestError, match="exceeds"):
        _service(order_repository).submit(json.dumps(payload).encode())

    assert order_repository.orders == {}


def test_submit_size_check_runs_before_presence_check(
    order_repository: InMemoryOrderRepository,
) -> None:
    with pytest.raises(InvalidRequestError, match="exceeds"):
        _service(order_repository).submit(b'{"padding": "' + b"x" * 20_000 + b'"}')


def test_submit_rejects_invalid_json(order_repository: InMemoryOrderRepository) -> None:
    with pytest.raises(InvalidRequestError, match="valid JSON"):
        _service(order_repository).submit(b"{not json")


def test_validate_order_details_rejects_unknown_field() -> None:
    details = dict(VALID_ORDER_DETAILS, status="shipped")

    with pytest.raises(InvalidRequestError, match="Unknown order field: status"):
        validate_order_details(details)


def test_validate_order_details_rejects_bad_email() -> None:
    details = dict(VALID_ORDER_DETAILS, email="not-an-email")

    with pytest.raises(InvalidRequestError, match="Invalid email format"):
        validate_order_details(details)


def test_validate_order_details_requires_ten_phone_digits() -> None:
    details = dict(VALID_ORDER_DETAILS, phone="(555) 123-456")

    with pytest.raises(InvalidRequestError, match="at least 10 digits"):
        validate_order_details(details)


@pytest.mark.parametrize(("field_name", "limit"), list(ORDER_FIELD_LIMITS.items()))
def test_validate_order_details_enforces_max_length(
    field_name: str, limit: int
) -> None:
    details = dict(VALID_ORDER_DETAILS)
    details[field_name] = "9" * (limit + 1)

    with pytest.raises(InvalidRequestError, match=f"{field_name} must be at most"):
        validate_order_details(details)


def test_validate_order_details_rejects_non_string() -> None:
    details = dict(VALID_ORDER_DETAILS)
    details["zipCode"] = 560001  # type: ignore[assignment]

    with pytest.raises(InvalidRequestError, match="zipCode is required"):
        validate_order_details(details)


@pytest.mark.parametrize(
    "key",
    [
        "other-folder/1714564800000-me.jpg",
        "user-photos/../secrets/1714564800000-me.jpg",
        "user-photos//1714564800000-me.jpg",
        "user-photos/me.jpg",
        "user-photos/1714564800000-me jpg",
        "user-photos/\u0661\u0662\u0663-me.jpg",
    ],
)
def test_validate_photo_key_rejects_bad_keys(key: str) -> None:
    with pytest.raises(InvalidRequestError, match="Invalid photo key"):
        validate_photo_key(key, FOLDER_PREFIX)


def test_validate_photo_key_accepts_presigned_key() -> None:
    validate_photo_key(VALID_PHOTO_KEY, FOLDER_PREFIX)


@pytest.mark.parametrize(
    ("url", "message"),
    [
        (f"http://{BUCKET_HOST}/{VALID_PHOTO_KEY}", "https"),
        (f"https://evil.example.com/{VALID_PHOTO_KEY}", "configured bucket"),
        (f"https://{BUCKET_HOST}:8443/{VALID_PHOTO_KEY}", "configured bucket"),
        (f"https://{BUCKET_HOST}/user-photos/1-other.jpg", "does not match"),
        (f"https://{BUCKET_HOST}/{VALID_PHOTO_KEY}?x=1", "does not match"),
    ],
)
def test_validate_photo_url_rejects_bad_urls(url: str, message: str) -> None:
    with pytest.raises(InvalidRequestError, match=message):
        validate_photo_url(url, VALID_PHOTO_KEY, BUCKET_HOST)


def test_create_order_propagates_storage_failure(
    order_repository: InMemoryOrderRepository,
) -> None:
    order_repository.fail_writes = True

    with pytest.raises(RuntimeError):
        _service(order_repository).create_order(order_payload())


def test_identical_submissions_create_distinct_orders(
    order_repository: InMemoryOrderRepository,
) -> None:
    service = _service(order_repository)

    first = service.create_order(order_payload())
    second = service.create_order(order_payload())

    assert first.order_id != second.order_id
    assert len(order_repository.orders) == 2


def test_list_orders_by_email(order_repository: InMemoryOrderRepository) -> None:
    service = _service(order_repository)
    order = service.create_order(order_payload())

    assert service.list_orders_by_email(" asha@example.com ") == [order]
    assert service.get_order(order.order_id) == order
    assert service.get_order("ORDER-missing") is None
