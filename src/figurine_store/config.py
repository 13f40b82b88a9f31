"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    aws_region: str = "us-east-1"
    s3_bucket_name: str
    s3_folder_path: str = "user-photos/"
    orders_table: str = "orders"
    contact_messages_table: str = "contact_messages"
    allowed_origins: str | None = None
    presign_expires_seconds: int = 300
    max_order_payload_bytes: int = 10 * 1024
    api_base_url: str = ""
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if value and value not in origins:
            origins.append(value)
    return origins or ["*"]


def normalize_folder_prefix(raw: str) -> str:
    """Return the object key prefix with exactly one trailing slash."""
    cleaned = raw.strip().strip("/")
    if not cleaned:
        return ""
    return f"{cleaned}/"
