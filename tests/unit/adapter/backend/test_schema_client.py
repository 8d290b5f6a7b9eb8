"""Unit tests for the backend schema client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from wedding.adapter.backend import MockBackendSchemaClient, RealBackendSchemaClient
from wedding.adapter.error import RemoteExecutionError
from wedding.domain.model import Migration

MIGRATION = Migration(
    version="0001_init",
    name="init.sql",
    sql="create table if not exists public.things (id int);",
)


def _client() -> RealBackendSchemaClient:
    return RealBackendSchemaClient(
        url="https://project.supabase.co/", api_key="service-key", timeout=5.0
    )


class TestRealBackendSchemaClient:
    """Tests for the RPC call made by RealBackendSchemaClient."""

    def test_rpc_url(self):
        assert _client().rpc_url == "https://project.supabase.co/rest/v1/rpc/exec_sql"

    def test_custom_rpc_function(self):
        client = RealBackendSchemaClient(
            url="https://project.supabase.co", api_key="k", rpc_function="run_sql"
        )

        assert client.rpc_url == "https://project.supabase.co/rest/v1/rpc/run_sql"

    @pytest.mark.asyncio
    async def test_posts_statement_once(self):
        """The whole migration goes out in a single authenticated call."""
        # Arrange
        mock_response = MagicMock()
        mock_response.is_success = True

        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=mock_response)
            mock_client.return_value.__aenter__.return_value.post = post

            # Act
            await _client().apply_migration(MIGRATION)

            # Assert
            post.assert_awaited_once()
            args, kwargs = post.call_args
            assert args[0] == "https://project.supabase.co/rest/v1/rpc/exec_sql"
            assert kwargs["json"] == {"sql_query": MIGRATION.statement()}
            assert kwargs["headers"]["apikey"] == "service-key"
            assert kwargs["headers"]["Authorization"] == "Bearer service-key"
            assert kwargs["timeout"] == 5.0

    @pytest.mark.asyncio
    async def test_backend_error_message_is_reported(self):
        # Arrange
        response = httpx.Response(
            400, json={"message": 'syntax error at or near "tabel"', "code": "42601"}
        )

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=response
            )

            # Act & Assert
            with pytest.raises(RemoteExecutionError) as exc_info:
                await _client().apply_migration(MIGRATION)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == 'syntax error at or near "tabel"'

    @pytest.mark.asyncio
    async def test_missing_rpc_function(self):
        response = httpx.Response(404, text="Not Found")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=response
            )

            with pytest.raises(RemoteExecutionError) as exc_info:
                await _client().apply_migration(MIGRATION)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Not Found"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(RemoteExecutionError, match="connection refused") as exc_info:
                await _client().apply_migration(MIGRATION)

        assert exc_info.value.status_code is None


class TestMockBackendSchemaClient:
    @pytest.mark.asyncio
    async def test_records_migrations(self):
        client = MockBackendSchemaClient()

        await client.apply_migration(MIGRATION)

        assert client.applied == [MIGRATION]

    @pytest.mark.asyncio
    async def test_raises_configured_error(self):
        client = MockBackendSchemaClient(error=RemoteExecutionError("boom"))

        with pytest.raises(RemoteExecutionError):
            await client.apply_migration(MIGRATION)
        assert client.applied == []
