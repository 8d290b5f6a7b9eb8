"""Bootstrap schema use case."""

from pathlib import Path

import logfire
from pydantic import BaseModel

from wedding.domain.model import Migration
from wedding.domain.service import SchemaService
from wedding.util.error import ScriptReadError


class BootstrapSchemaRequest(BaseModel):
    """Bootstrap schema request."""

    script_path: Path
    version: str
    name: str | None = None  # Defaults to the script's file name


class BootstrapSchemaResponse(BaseModel):
    """Bootstrap schema response."""

    version: str
    name: str
    checksum: str


def read_script(path: Path) -> str:
    """Read a SQL script as UTF-8 text.

    Raises:
        ScriptReadError: If the file is missing, unreadable, not UTF-8 or empty
    """
    try:
        sql = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ScriptReadError(str(path), "file not found")
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptReadError(str(path), str(e))

    if not sql.strip():
        raise ScriptReadError(str(path), "file is empty")
    return sql


class BootstrapSchemaUseCase:
    """Use case for provisioning the remote schema from a SQL script."""

    def __init__(self, schema_service: SchemaService) -> None:
        """Initialize bootstrap schema use case.

        Args:
            schema_service: Schema domain service
        """
        self.schema_service = schema_service

    async def execute(self, request: BootstrapSchemaRequest) -> BootstrapSchemaResponse:
        """Execute bootstrap flow.

        Steps:
        1. Read the script (nothing is sent if this fails)
        2. Wrap it in a versioned migration
        3. Apply it in one remote call

        Raises:
            ScriptReadError: If the script can't be read
            RemoteExecutionError: If the backend rejects the script
        """
        sql = read_script(request.script_path)
        logfire.info(
            "Schema script loaded",
            script_path=str(request.script_path),
            size=len(sql),
        )

        migration = Migration(
            version=request.version,
            name=request.name or request.script_path.name,
            sql=sql,
        )
        applied = await self.schema_service.apply(migration)

        return BootstrapSchemaResponse(
            version=applied.version,
            name=applied.name,
            checksum=applied.checksum,
        )
