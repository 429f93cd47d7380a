"""Tests for container wiring."""

import asyncio

import pytest

from restaurant_directory.adapters.graphql_record_store import (
    HttpxGraphQLRecordStore,
)
from restaurant_directory.adapters.supabase_record_store import SupabaseRecordStore
from restaurant_directory.config import (
    parse_record_store_backend,
    resolve_graphql_url,
)
from restaurant_directory.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.session_gate is not None
    assert container.record_sync.store is container.record_store
    assert isinstance(container.record_store, HttpxGraphQLRecordStore)
    assert container.record_store.endpoint == (
        "https://example.supabase.co/graphql/v1"
    )
    assert container.record_store.api_key == "graphql-key"
    asyncio.run(container.close_resources())


def test_build_container_with_supabase_backend(settings) -> None:
    settings.record_store_backend = "Supabase"
    settings.restaurants_table = "venues"

    container = build_container(settings)

    assert isinstance(container.record_store, SupabaseRecordStore)
    assert container.record_store.table_name == "venues"
    asyncio.run(container.close_resources())


def test_resolve_graphql_url_prefers_explicit_endpoint(settings) -> None:
    settings.graphql_url = "https://api.example.com/graphql"

    assert resolve_graphql_url(settings) == "https://api.example.com/graphql"


def test_parse_record_store_backend_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown record store backend"):
        parse_record_store_backend("dynamo")
