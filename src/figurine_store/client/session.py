"""Client-side wiring for one storefront session."""

from dataclasses import dataclass

from figurine_store.client.api_client import HttpxStorefrontClient
from figurine_store.client.notifications import NotificationBus
from figurine_store.client.submissions import ContactSubmitter, OrderSubmitter
from figurine_store.client.uploads import UploadCoordinator


@dataclass
class StorefrontSession:
    """Holds the client objects that share one API session and notification bus."""

    api: HttpxStorefrontClient
    notifications: NotificationBus
    uploads: UploadCoordinator
    orders: OrderSubmitter
    contact: ContactSubmitter

    @classmethod
    def create(
        cls,
        base_url: str,
        bucket_name: str | None = None,
        region: str | None = None,
    ) -> "StorefrontSession":
        """Create a session; call ``close`` when the storefront shuts down."""
        api = HttpxStorefrontClient.create(base_url)
        notifications = NotificationBus()
        return cls(
            api=api,
            notifications=notifications,
            uploads=UploadCoordinator(
                api=api,
                notifications=notifications,
                bucket_name=bucket_name,
                region=region,
            ),
            orders=OrderSubmitter(api=api, notifications=notifications),
            contact=ContactSubmitter(api=api, notifications=notifications),
        )

    async def place_order(self, form: dict[str, str]) -> str | None:
        """Submit the order form with the currently uploaded photo."""
        order_id = await self.orders.submit(form, self.uploads.uploaded)
        if order_id:
            self.uploads.clear()
        return order_id

    async def close(self) -> None:
        """Tear down the notification bus and the HTTP session."""
        self.notifications.close()
        await self.api.close()
