"""Supabase table implementation of the record store."""

from dataclasses import dataclass

import httpx
from postgrest import APIError
from supabase import Client

from restaurant_directory.errors import RecordStoreError
from restaurant_directory.graphql_operations import RecordOperation
from restaurant_directory.services.records import RecordStore

_COLUMNS = "id, name, description, owner"


@dataclass
class SupabaseRecordStore(RecordStore):
    """Supabase-backed store answering the named record operations.

    Results are shaped like the GraphQL responses so callers do not need to
    know which backend is configured.
    """

    client: Client
    table_name: str = "restaurants"

    async def execute(
        self,
        operation: RecordOperation,
        variables: dict[str, object] | None = None,
    ) -> dict[str, object]:
        """Run the operation against the restaurants table."""
        variables = variables or {}
        try:
            if operation is RecordOperation.LIST_RECORDS:
                result: object = {"items": self._list(), "nextToken": None}
            elif operation is RecordOperation.CREATE_RECORD:
                result = self._create(_input(variables))
            else:
                result = self._delete(_input(variables))
        except (APIError, httpx.HTTPError) as exc:
            raise RecordStoreError(
                f"{operation.operation_name} failed",
                errors=[_error_detail(exc)],
            ) from exc
        return {operation.result_field: result}

    def _list(self) -> list[dict[str, object]]:
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .order("created_at")
            .execute()
        )
        return list(response.data or [])

    def _create(self, payload: dict[str, object]) -> dict[str, object]:
        response = self.client.table(self.table_name).insert(payload).execute()
        if not response.data:
            raise RecordStoreError("Failed to create restaurant")
        return response.data[0]

    def _delete(self, payload: dict[str, object]) -> dict[str, object] | None:
        record_id = payload.get("id")
        if not record_id:
            raise RecordStoreError("Delete requires an id")
        response = (
            self.client.table(self.table_name)
            .delete()
            .eq("id", str(record_id))
            .execute()
        )
        return response.data[0] if response.data else None


def _input(variables: dict[str, object]) -> dict[str, object]:
    payload = variables.get("input")
    if not isinstance(payload, dict):
        raise RecordStoreError("Missing input variables")
    return payload


def _error_detail(exc: Exception) -> dict[str, object]:
    if isinstance(exc, APIError):
        return {"message": exc.message, "code": exc.code, "details": exc.details}
    return {"message": str(exc)}
