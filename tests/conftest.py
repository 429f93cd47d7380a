"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field

import pytest

from restaurant_directory.config import Settings
from restaurant_directory.containers import AppContainer
from restaurant_directory.domain.sessions import Session
from restaurant_directory.errors import RecordStoreError, SessionResolutionError
from restaurant_directory.graphql_operations import RecordOperation
from restaurant_directory.services.records import RecordStore, RecordSyncController
from restaurant_directory.services.sessions import IdentityProvider, SessionGate


@dataclass
class InMemoryRecordStore(RecordStore):
    """In-memory record store that answers like the GraphQL API."""

    rows: list[dict[str, object]] = field(default_factory=list)
    calls: list[tuple[RecordOperation, dict[str, object] | None]] = field(
        default_factory=list
    )
    failing: set[RecordOperation] = field(default_factory=set)
    next_ids: list[str] = field(default_factory=list)
    _counter: int = 0

    async def execute(
        self,
        operation: RecordOperation,
        variables: dict[str, object] | None = None,
    ) -> dict[str, object]:
        self.calls.append((operation, variables))
        if operation in self.failing:
            raise RecordStoreError(
                f"{operation.operation_name} failed",
                errors=[{"errorType": "Unauthorized", "message": "denied"}],
            )
        if operation is RecordOperation.LIST_RECORDS:
            return {
                "listRestaurants": {
                    "items": [dict(row) for row in self.rows],
                    "nextToken": None,
                }
            }
        payload = dict(variables["input"])  # type: ignore[index]
        if operation is RecordOperation.CREATE_RECORD:
            row = {"id": self._next_id(), **payload}
            self.rows.append(row)
            return {"createRestaurant": dict(row)}
        removed = [row for row in self.rows if row["id"] == payload["id"]]
        self.rows = [row for row in self.rows if row["id"] != payload["id"]]
        return {"deleteRestaurant": removed[0] if removed else None}

    def count(self, operation: RecordOperation) -> int:
        return sum(1 for called, _ in self.calls if called is operation)

    def _next_id(self) -> str:
        if self.next_ids:
            return self.next_ids.pop(0)
        self._counter += 1
        return f"generated-{self._counter}"


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider returning a fixed session or failing."""

    session: Session | None = None
    accounts: dict[str, tuple[str, Session]] = field(default_factory=dict)
    fail_sign_out: bool = False
    sign_out_calls: int = 0

    async def get_current_session(self) -> Session:
        if self.session is None:
            raise SessionResolutionError("No authenticated user")
        return self.session

    async def sign_in(self, email: str, password: str) -> None:
        account = self.accounts.get(email)
        if account is None or account[0] != password:
            raise RuntimeError("Invalid login credentials")
        self.session = account[1]

    async def sign_out(self) -> None:
        self.sign_out_calls += 1
        if self.fail_sign_out:
            raise RuntimeError("network down")
        self.session = None


def restaurant_row(
    record_id: str, name: str = "Cafe", owner: str = "alice"
) -> dict[str, object]:
    return {
        "id": record_id,
        "name": name,
        "description": f"{name} description",
        "owner": owner,
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_anon_key="header.payload.signature",
        graphql_api_key="graphql-key",
    )


@pytest.fixture
def alice() -> Session:
    return Session.from_identity("alice", display_label="alice@example.com")


@pytest.fixture
def record_store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def identity_provider(alice: Session) -> FakeIdentityProvider:
    return FakeIdentityProvider(session=alice)


@pytest.fixture
def container(
    settings: Settings,
    record_store: InMemoryRecordStore,
    identity_provider: FakeIdentityProvider,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        identity_provider=identity_provider,
        record_store=record_store,
        session_gate=SessionGate(identity_provider),
        record_sync=RecordSyncController(record_store),
        close_resources=close_resources,
    )


@pytest.fixture(autouse=True)
def _propagate_app_logs() -> None:
    logging.getLogger("restaurant_directory").propagate = True
