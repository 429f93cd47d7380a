"""Synchronization of local restaurant state with the remote record store."""

import json
import logging
from dataclasses import dataclass, field
from typing import Protocol

from restaurant_directory.domain.records import (
    AppState,
    DraftInput,
    RestaurantRecord,
    parse_record,
)
from restaurant_directory.domain.sessions import Session
from restaurant_directory.errors import RecordStoreError, RecordValidationError
from restaurant_directory.graphql_operations import RecordOperation

_logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Query-execution interface for the remote record store."""

    async def execute(
        self,
        operation: RecordOperation,
        variables: dict[str, object] | None = None,
    ) -> dict[str, object]:
        """Execute a named operation and return its data payload."""


@dataclass
class RecordSyncController:
    """Owns the local records and draft and keeps them in step with the store.

    Create and delete reconcile differently: a successful create re-fetches
    the whole list (``resync_after_write``) while a successful delete filters
    the local list (``local_patch_after_write``). Failures are logged and leave
    the state untouched.
    """

    store: RecordStore
    state: AppState = field(default_factory=AppState)

    @property
    def records(self) -> list[RestaurantRecord]:
        """Return the locally cached records in server order."""
        return self.state.records

    @property
    def draft(self) -> DraftInput:
        """Return the current create-form buffer."""
        return self.state.draft

    def update_draft(
        self, name: str | None = None, description: str | None = None
    ) -> DraftInput:
        """Replace the draft with the given fields changed."""
        self.state.draft = self.state.draft.with_changes(
            name=name, description=description
        )
        return self.state.draft

    async def list_all(self) -> list[RestaurantRecord]:
        """Fetch every record and replace the local list with the result."""
        try:
            data = await self.store.execute(RecordOperation.LIST_RECORDS)
            records = _parse_list(data)
        except RecordStoreError as exc:
            _logger.error("Error fetching restaurants: %s", _format_detail(exc))
            return self.state.records
        self.state.records = records
        return records

    async def create(
        self, draft: DraftInput, session: Session | None
    ) -> RestaurantRecord | None:
        """Create a record owned by the session identity, then resync."""
        try:
            _validate(draft, session)
        except RecordValidationError as exc:
            _logger.error("%s", exc)
            return None

        payload = {
            "name": draft.name,
            "description": draft.description,
            "owner": session.identity,
        }
        _logger.info("Creating restaurant with input: %s", payload)
        try:
            data = await self.store.execute(
                RecordOperation.CREATE_RECORD, {"input": payload}
            )
        except RecordStoreError as exc:
            _logger.error("Error creating restaurant: %s", _format_detail(exc))
            return None

        created = _parse_created(data)
        _logger.info("Restaurant created successfully: %s", created)
        self.state.draft = DraftInput()
        await self.resync_after_write()
        return created

    async def remove(self, record_id: str) -> None:
        """Delete a record remotely, then drop it from the local list."""
        try:
            await self.store.execute(
                RecordOperation.DELETE_RECORD, {"input": {"id": record_id}}
            )
        except RecordStoreError as exc:
            _logger.error("Error deleting restaurant: %s", _format_detail(exc))
            return
        _logger.info("Restaurant with id %s deleted", record_id)
        self.local_patch_after_write(record_id)

    async def resync_after_write(self) -> list[RestaurantRecord]:
        """Reconcile by re-fetching the full list from the store."""
        return await self.list_all()

    def local_patch_after_write(self, record_id: str) -> list[RestaurantRecord]:
        """Reconcile by removing the deleted record from the local list."""
        self.state.records = [
            record for record in self.state.records if record.id != record_id
        ]
        return self.state.records


def _validate(draft: DraftInput, session: Session | None) -> None:
    """Check create preconditions before any remote call."""
    if not draft.is_complete():
        raise RecordValidationError("Restaurant name and description are required!")
    if session is None or not session.identity:
        raise RecordValidationError(
            "User is not authenticated or username is missing"
        )


def _parse_list(data: dict[str, object]) -> list[RestaurantRecord]:
    """Parse a list result, reading only the first page."""
    result = data.get(RecordOperation.LIST_RECORDS.result_field)
    if not isinstance(result, dict):
        raise RecordStoreError("Malformed list response")
    if result.get("nextToken"):
        _logger.debug("Ignoring further pages of restaurants")
    items = result.get("items")
    if not isinstance(items, list):
        raise RecordStoreError("Malformed list response")
    try:
        return [parse_record(row) for row in items if row]
    except (KeyError, TypeError, AttributeError) as exc:
        raise RecordStoreError("Malformed restaurant row") from exc


def _parse_created(data: dict[str, object]) -> RestaurantRecord | None:
    """Parse the record echoed back by a create mutation."""
    row = data.get(RecordOperation.CREATE_RECORD.result_field)
    if not isinstance(row, dict) or "id" not in row:
        return None
    return parse_record(row)


def _format_detail(exc: RecordStoreError) -> str:
    return json.dumps(exc.detail(), indent=2, default=str)
