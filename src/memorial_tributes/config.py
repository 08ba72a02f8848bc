"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "memory"
    storage_dir: str = ".data"
    storage_key: str = "tributes"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "kv_store"
    id_scheme: str = "timestamp"
    api_base_url: str = "http://localhost:8000"
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_backend(raw: str) -> str:
    """Normalize the configured storage backend name."""
    backend = raw.strip().lower()
    if backend in {"", "none", "off"}:
        return "none"
    if backend not in {"memory", "file", "supabase"}:
        raise ValueError(f"Unknown storage backend: {raw}")
    return backend
