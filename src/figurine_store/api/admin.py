"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from figurine_store.api.models import ContactMessageView, OrderView

if TYPE_CHECKING:
    from figurine_store.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/orders", dependencies=[Depends(require_admin)])
async def orders_by_email(email: str, request: Request) -> dict[str, object]:
    """Return orders placed with an email address, newest first."""
    container: AppContainer = request.app.state.container
    orders = container.order_service.list_orders_by_email(email)
    return {
        "orders": [
            OrderView.from_record(order).model_dump(by_alias=True) for order in orders
        ]
    }


@router.get("/orders/{order_id}", dependencies=[Depends(require_admin)])
async def order_detail(order_id: str, request: Request) -> dict[str, object]:
    """Return a single stored order."""
    container: AppContainer = request.app.state.container
    order = container.order_service.get_order(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"order": OrderView.from_record(order).model_dump(by_alias=True)}


@router.get("/contact-messages", dependencies=[Depends(require_admin)])
async def contact_messages(request: Request, limit: int = 20) -> dict[str, object]:
    """Return recent contact messages."""
    container: AppContainer = request.app.state.container
    messages = container.contact_service.list_recent(limit)
    return {
        "messages": [
            ContactMessageView.from_record(message).model_dump(by_alias=True)
            for message in messages
        ]
    }
