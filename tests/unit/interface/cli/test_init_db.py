"""Unit tests for the schema bootstrap command."""

from unittest.mock import patch

import pytest

from wedding.adapter.backend import MockBackendSchemaClient
from wedding.adapter.error import RemoteExecutionError
from wedding.config import BackendSettings
from wedding.interface.cli import init_db
from wedding.interface.cli.init_db import bootstrap

SQL = "create table if not exists public.things (id int);\n"

CONFIGURED = BackendSettings(url="https://project.supabase.co", api_key="service-key")


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "init.sql"
    path.write_text(SQL, encoding="utf-8")
    return path


class FailingClient(MockBackendSchemaClient):
    async def apply_migration(self, migration):
        raise RuntimeError("event loop exploded")


class TestBootstrap:
    """Exit status and diagnostics of the bootstrap routine."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "backend",
        [
            BackendSettings(),
            BackendSettings(url="https://project.supabase.co"),
            BackendSettings(api_key="service-key"),
            BackendSettings(url="  ", api_key="service-key"),
        ],
    )
    async def test_missing_configuration_stops_before_reading(
        self, backend, script, capsys
    ):
        """Unset connection values fail without touching the script."""
        # Arrange
        client = MockBackendSchemaClient()

        # Act
        with patch(
            "wedding.application.usecase.schema.bootstrap_schema.read_script"
        ) as read_script:
            code = await bootstrap(backend, script, "0001_init", client=client)

        # Assert
        assert code == 1
        read_script.assert_not_called()
        assert client.applied == []
        captured = capsys.readouterr()
        assert "Configuration error" in captured.err
        assert "BACKEND__" in captured.err
        assert captured.out == ""

    @pytest.mark.asyncio
    async def test_missing_script_stops_before_remote_call(self, tmp_path, capsys):
        # Arrange
        client = MockBackendSchemaClient()

        # Act
        code = await bootstrap(
            CONFIGURED, tmp_path / "missing.sql", "0001_init", client=client
        )

        # Assert
        assert code == 1
        assert client.applied == []
        captured = capsys.readouterr()
        assert "I/O error" in captured.err
        assert "missing.sql" in captured.err

    @pytest.mark.asyncio
    async def test_success(self, script, capsys):
        # Arrange
        client = MockBackendSchemaClient()

        # Act
        code = await bootstrap(CONFIGURED, script, "0001_init", client=client)

        # Assert
        assert code == 0
        assert len(client.applied) == 1
        assert client.applied[0].version == "0001_init"
        assert client.applied[0].sql == SQL
        assert "Database initialized successfully" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_remote_failure(self, script, capsys):
        client = MockBackendSchemaClient(
            error=RemoteExecutionError("permission denied", status_code=401)
        )

        code = await bootstrap(CONFIGURED, script, "0001_init", client=client)

        assert code == 1
        captured = capsys.readouterr()
        assert "Error initializing database" in captured.err
        assert "permission denied" in captured.err
        assert captured.out == ""

    @pytest.mark.asyncio
    async def test_unexpected_failure(self, script, capsys):
        code = await bootstrap(CONFIGURED, script, "0001_init", client=FailingClient())

        assert code == 1
        assert "event loop exploded" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_builds_http_client_from_settings(self, script):
        """Without an injected client the configured backend is called."""
        with patch.object(
            init_db.RealBackendSchemaClient, "apply_migration", autospec=True
        ) as apply_migration:
            code = await bootstrap(CONFIGURED, script, "0001_init")

        assert code == 0
        client, migration = apply_migration.call_args.args
        assert client.rpc_url == "https://project.supabase.co/rest/v1/rpc/exec_sql"
        assert migration.sql == SQL


class TestMain:
    """Tests for the process entry point."""

    def test_exits_non_zero_without_configuration(self, capsys):
        with (
            patch.object(init_db, "configure_logfire"),
            patch.object(init_db, "instrument_httpx"),
            patch.object(init_db, "Settings") as settings_cls,
        ):
            settings_cls.return_value.backend = BackendSettings()
            code = init_db.main()

        # Assert
        assert code == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_uses_configured_script(self, script):
        # Arrange
        with (
            patch.object(init_db, "configure_logfire"),
            patch.object(init_db, "instrument_httpx"),
            patch.object(init_db, "Settings") as settings_cls,
            patch.object(
                init_db.RealBackendSchemaClient, "apply_migration", autospec=True
            ) as apply_migration,
        ):
            settings = settings_cls.return_value
            settings.backend = CONFIGURED
            settings.bootstrap.script_path = script
            settings.bootstrap.migration_version = "0002_test"

            # Act
            code = init_db.main()

        # Assert
        assert code == 0
        _, migration = apply_migration.call_args.args
        assert migration.version == "0002_test"
