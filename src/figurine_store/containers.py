"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from figurine_store.adapters.s3_presigner import Boto3ObjectSigner
from figurine_store.adapters.supabase_contact_repository import (
    SupabaseContactMessageRepository,
)
from figurine_store.adapters.supabase_order_repository import SupabaseOrderRepository
from figurine_store.config import Settings, normalize_folder_prefix
from figurine_store.domain.uploads import s3_bucket_host
from figurine_store.services.contact import ContactService
from figurine_store.services.orders import OrderService
from figurine_store.services.uploads import PresignService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    presign_service: PresignService
    order_service: OrderService
    contact_service: ContactService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    folder_prefix = normalize_folder_prefix(resolved_settings.s3_folder_path)
    signer = Boto3ObjectSigner.create(
        bucket=resolved_settings.s3_bucket_name,
        region=resolved_settings.aws_region,
    )
    presign_service = PresignService(
        signer=signer,
        folder_prefix=folder_prefix,
        expires_in=resolved_settings.presign_expires_seconds,
    )
    order_service = OrderService(
        repository=SupabaseOrderRepository(
            supabase_client, table_name=resolved_settings.orders_table
        ),
        folder_prefix=folder_prefix,
        bucket_host=s3_bucket_host(
            resolved_settings.s3_bucket_name, resolved_settings.aws_region
        ),
        max_payload_bytes=resolved_settings.max_order_payload_bytes,
    )
    contact_service = ContactService(
        SupabaseContactMessageRepository(
            supabase_client, table_name=resolved_settings.contact_messages_table
        )
    )

    async def close_resources() -> None:
        signer.close()

    return AppContainer(
        settings=resolved_settings,
        presign_service=presign_service,
        order_service=order_service,
        contact_service=contact_service,
        close_resources=close_resources,
    )
