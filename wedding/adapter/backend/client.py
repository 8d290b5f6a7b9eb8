"""Backend-as-a-service schema client.

Applies migrations by calling the SQL-executing RPC function installed in
the hosted Postgres project (``POST /rest/v1/rpc/<function>``).
"""

import httpx
import logfire

from wedding.adapter.error import RemoteExecutionError
from wedding.domain.model.migration import Migration
from wedding.domain.service.schema_service import SchemaClient


class BackendSchemaClient(SchemaClient):
    """Base class for backend schema clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealBackendSchemaClient(BackendSchemaClient):
    """Schema client calling the backend's RPC endpoint over HTTP."""

    def __init__(
        self,
        url: str,
        api_key: str,
        rpc_function: str = "exec_sql",
        timeout: float = 30.0,
    ) -> None:
        """Initialize backend schema client.

        Args:
            url: Backend project base URL
            api_key: Access key sent as ``apikey`` and bearer token
            rpc_function: Name of the SQL-executing RPC function
            timeout: Seconds to wait for the call
        """
        self.rpc_url = f"{url.rstrip('/')}/rest/v1/rpc/{rpc_function}"
        self.api_key = api_key
        self.timeout = timeout

    async def apply_migration(self, migration: Migration) -> None:
        """Submit the migration statement in one RPC call.

        Args:
            migration: Migration to apply

        Raises:
            RemoteExecutionError: If the call fails or the backend reports an error
        """
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.rpc_url,
                    json={"sql_query": migration.statement()},
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Backend RPC HTTP error", rpc_url=self.rpc_url, error=str(e)
            )
            raise RemoteExecutionError(f"HTTP error calling backend: {e}")

        if not response.is_success:
            message = _error_message(response)
            logfire.error(
                "Backend RPC failed",
                rpc_url=self.rpc_url,
                status_code=response.status_code,
                error=message,
            )
            raise RemoteExecutionError(message, status_code=response.status_code)

        logfire.info(
            "Backend RPC succeeded",
            rpc_url=self.rpc_url,
            version=migration.version,
        )


def _error_message(response: httpx.Response) -> str:
    """Best description of a failed call: the JSON ``message`` or the body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or response.reason_phrase


class MockBackendSchemaClient(BackendSchemaClient):
    """Mock schema client for testing.

    Records applied migrations without making real calls. Set ``error`` to
    make the next calls fail.
    """

    def __init__(self, error: RemoteExecutionError | None = None) -> None:
        self.applied: list[Migration] = []
        self.error = error

    async def apply_migration(self, migration: Migration) -> None:
        """Record the migration, or raise the configured error."""
        if self.error is not None:
            raise self.error
        self.applied.append(migration)
