"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from figurine_store.api.admin import router as admin_router
from figurine_store.api.models import (
    ApiResponse,
    ContactMessageResponse,
    CreateOrderResponse,
    PresignResponse,
)
from figurine_store.app_logging import configure_logging
from figurine_store.config import parse_allowed_origins
from figurine_store.containers import AppContainer
from figurine_store.domain.contact import CONFIRMATION_TEXT
from figurine_store.domain.errors import InvalidRequestError
from figurine_store.services.payloads import parse_json_object

SERVER_ERROR = "Server error"
CONTACT_SAVE_ERROR = "Failed to save message. Please try again later."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.allowed_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Admin-Token"],
    )

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/presign")
    async def presign(request: Request) -> JSONResponse:
        """Issue a presigned PUT URL for one photo upload."""
        state_container: AppContainer = request.app.state.container
        try:
            payload = parse_json_object(await request.body())
            upload = state_container.presign_service.create_upload(
                payload.get("fileName"), payload.get("fileType")
            )
        except InvalidRequestError as exc:
            logger.info("Rejected presign request: %s", exc.message)
            return _respond(ApiResponse(success=False, error=exc.message), 400)
        except Exception:
            logger.exception("Failed to issue presigned upload URL")
            return _respond(ApiResponse(success=False, error=SERVER_ERROR), 500)
        return _respond(
            PresignResponse(
                success=True,
                url=upload.url,
                key=upload.key,
                file_url=upload.file_url,
            )
        )

    @app.post("/create-order")
    async def create_order(request: Request) -> JSONResponse:
        """Validate and store one order."""
        state_container: AppContainer = request.app.state.container
        try:
            order = state_container.order_service.submit(await request.body())
        except InvalidRequestError as exc:
            logger.info("Rejected order submission: %s", exc.message)
            return _respond(ApiResponse(success=False, error=exc.message), 400)
        except Exception:
            logger.exception("Failed to create order")
            return _respond(ApiResponse(success=False, error=SERVER_ERROR), 500)
        return _respond(CreateOrderResponse(success=True, order_id=order.order_id))

    @app.post("/contactMessage")
    async def contact_message(request: Request) -> JSONResponse:
        """Validate and store one contact message."""
        state_container: AppContainer = request.app.state.container
        try:
            payload = parse_json_object(await request.body())
            record = state_container.contact_service.submit(payload)
        except InvalidRequestError as exc:
            logger.info("Rejected contact message: %s", exc.message)
            return _respond(ApiResponse(success=False, error=exc.message), 400)
        except Exception:
            logger.exception("Failed to save contact message")
            return _respond(ApiResponse(success=False, error=CONTACT_SAVE_ERROR), 500)
        return _respond(
            ContactMessageResponse(
                success=True,
                message_id=record.message_id,
                message=CONFIRMATION_TEXT,
            )
        )

    return app


def _respond(body: ApiResponse, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        body.model_dump(by_alias=True, exclude_none=True), status_code=status_code
    )
