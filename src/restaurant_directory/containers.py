"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from restaurant_directory.adapters.graphql_record_store import (
    HttpxGraphQLRecordStore,
)
from restaurant_directory.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from restaurant_directory.adapters.supabase_record_store import SupabaseRecordStore
from restaurant_directory.config import (
    Settings,
    parse_record_store_backend,
    resolve_graphql_url,
)
from restaurant_directory.services.records import RecordStore, RecordSyncController
from restaurant_directory.services.sessions import IdentityProvider, SessionGate


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_provider: IdentityProvider
    record_store: RecordStore
    session_gate: SessionGate
    record_sync: RecordSyncController
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_anon_key
    )
    identity_provider = SupabaseIdentityProvider(supabase_client)
    backend = parse_record_store_backend(resolved_settings.record_store_backend)

    graphql_store: HttpxGraphQLRecordStore | None = None
    record_store: RecordStore
    if backend == "graphql":
        graphql_store = HttpxGraphQLRecordStore.create(
            endpoint=resolve_graphql_url(resolved_settings),
            api_key=(
                resolved_settings.graphql_api_key
                or resolved_settings.supabase_anon_key
            ),
            access_token=identity_provider.access_token,
            timeout=resolved_settings.request_timeout_seconds,
        )
        record_store = graphql_store
    else:
        record_store = SupabaseRecordStore(
            supabase_client, table_name=resolved_settings.restaurants_table
        )

    session_gate = SessionGate(identity_provider)
    record_sync = RecordSyncController(record_store)

    async def close_resources() -> None:
        if graphql_store is not None:
            await graphql_store.close()

    return AppContainer(
        settings=resolved_settings,
        identity_provider=identity_provider,
        record_store=record_store,
        session_gate=session_gate,
        record_sync=record_sync,
        close_resources=close_resources,
    )
