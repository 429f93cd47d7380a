"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

RECORD_STORE_BACKENDS = frozenset({"graphql", "supabase"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_anon_key: str
    graphql_url: str | None = None
    graphql_api_key: str | None = None
    record_store_backend: str = "graphql"
    restaurants_table: str = "restaurants"
    request_timeout_seconds: float = 10.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_graphql_url(settings: Settings) -> str:
    """Return the GraphQL endpoint, defaulting to the Supabase GraphQL path."""
    if settings.graphql_url:
        return settings.graphql_url
    return f"{settings.supabase_url.rstrip('/')}/graphql/v1"


def parse_record_store_backend(raw: str) -> str:
    """Normalize the configured record store backend name."""
    cleaned = raw.strip().lower()
    if cleaned not in RECORD_STORE_BACKENDS:
        raise ValueError(f"Unknown record store backend: {raw!r}")
    return cleaned
