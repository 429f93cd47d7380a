"""GraphQL record store client."""

from collections.abc import Callable
from dataclasses import dataclass

import httpx

from restaurant_directory.errors import RecordStoreError
from restaurant_directory.graphql_operations import RecordOperation
from restaurant_directory.services.records import RecordStore


@dataclass
class HttpxGraphQLRecordStore(RecordStore):
    """Record store that executes GraphQL operations over HTTPS with httpx."""

    endpoint: str
    http_client: httpx.AsyncClient
    api_key: str | None = None
    access_token: Callable[[], str | None] | None = None
    timeout: float = 10.0

    @classmethod
    def create(
        cls,
        endpoint: str,
        api_key: str | None = None,
        access_token: Callable[[], str | None] | None = None,
        timeout: float = 10.0,
    ) -> "HttpxGraphQLRecordStore":
        """Create a GraphQL store with a managed httpx session."""
        return cls(
            endpoint=endpoint,
            http_client=httpx.AsyncClient(),
            api_key=api_key,
            access_token=access_token,
            timeout=timeout,
        )

    async def execute(
        self,
        operation: RecordOperation,
        variables: dict[str, object] | None = None,
    ) -> dict[str, object]:
        """POST the operation document and return the ``data`` payload."""
        payload: dict[str, object] = {
            "query": operation.document,
            "operationName": operation.operation_name,
            "variables": variables or {},
        }
        try:
            response = await self.http_client.post(
                self.endpoint,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            raise RecordStoreError(
                f"{operation.operation_name} failed with HTTP "
                f"{exc.response.status_code}",
                errors=[{"message": exc.response.text}],
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise RecordStoreError(
                f"{operation.operation_name} request failed",
                errors=[{"message": str(exc)}],
            ) from exc

        if not isinstance(body, dict):
            raise RecordStoreError(f"{operation.operation_name} returned no data")
        errors = body.get("errors")
        if errors:
            raise RecordStoreError(
                f"{operation.operation_name} returned errors", errors=list(errors)
            )
        data = body.get("data")
        if not isinstance(data, dict):
            raise RecordStoreError(f"{operation.operation_name} returned no data")
        return data

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    def _headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.api_key:
            headers["x-api-key"] = self.api_key
            headers["apikey"] = self.api_key
        token = self.access_token() if self.access_token else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers
