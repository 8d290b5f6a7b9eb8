"""Schema bootstrap command.

Provisions the remote schema by sending ``supabase/init.sql`` to the
backend's SQL RPC function in a single call, recorded in
``public.schema_migrations``. Every failure is terminal: the command prints
a diagnostic and exits 1 without retrying or undoing anything.

Do not run two instances against the same project at once; nothing locks
the schema while the script runs.
"""

import asyncio
import sys
from pathlib import Path

import logfire
from pydantic import ValidationError

from wedding.adapter.backend import RealBackendSchemaClient
from wedding.adapter.error import RemoteExecutionError
from wedding.application.usecase.schema import (
    BootstrapSchemaRequest,
    BootstrapSchemaUseCase,
)
from wedding.config import BackendSettings, Settings
from wedding.domain.service import SchemaClient, SchemaService
from wedding.util.error import ConfigurationError, ScriptReadError
from wedding.util.observability import configure_logfire, instrument_httpx


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


async def bootstrap(
    backend: BackendSettings,
    script_path: Path,
    version: str,
    client: SchemaClient | None = None,
) -> int:
    """Apply the schema script and report the outcome as an exit status.

    Credentials are checked before the script is read, and the script is
    read before anything is sent.

    Args:
        backend: Backend connection settings
        script_path: SQL script to apply
        version: Migration version recorded for the script
        client: Schema client (built from ``backend`` when omitted)

    Returns:
        0 on success, 1 on any failure
    """
    with logfire.span(
        "init_db.bootstrap", script_path=str(script_path), version=version
    ):
        try:
            backend.require_credentials()
        except ConfigurationError as e:
            logfire.error("Backend configuration missing", error=str(e))
            return _fail(f"Configuration error: {e}")

        if client is None:
            client = RealBackendSchemaClient(
                url=backend.url,
                api_key=backend.api_key,
                rpc_function=backend.rpc_function,
                timeout=backend.timeout,
            )
        use_case = BootstrapSchemaUseCase(schema_service=SchemaService(client))

        try:
            result = await use_case.execute(
                BootstrapSchemaRequest(script_path=script_path, version=version)
            )
        except ScriptReadError as e:
            logfire.error("Schema script unreadable", error=str(e))
            return _fail(f"I/O error: {e}")
        except RemoteExecutionError as e:
            logfire.error(
                "Schema script rejected by backend",
                error=e.message,
                status_code=e.status_code,
            )
            return _fail(f"Error initializing database: {e}")
        except Exception as e:
            logfire.error(
                "Schema bootstrap failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            return _fail(f"Unexpected error: {e}")

        logfire.info(
            "Database initialized",
            version=result.version,
            checksum=result.checksum,
        )
        print("Database initialized successfully!")
        return 0


def main() -> int:
    """Load settings from the environment and run the bootstrap."""
    try:
        settings = Settings()
    except ValidationError as e:
        return _fail(f"Configuration error: {e}")

    configure_logfire(settings)
    instrument_httpx()

    return asyncio.run(
        bootstrap(
            settings.backend,
            settings.bootstrap.script_path,
            settings.bootstrap.migration_version,
        )
    )


if __name__ == "__main__":
    sys.exit(main())
