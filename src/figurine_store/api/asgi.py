"""ASGI entrypoint for the storefront API."""

from figurine_store.api.app import create_app
from figurine_store.containers import build_container

app = create_app(build_container())
