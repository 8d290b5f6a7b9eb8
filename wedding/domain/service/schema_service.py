"""Schema provisioning domain service."""

import logfire

from wedding.domain.model.migration import Migration

from .base import Service


class SchemaClient:
    """Backend interface for applying schema migrations."""

    async def apply_migration(self, migration: Migration) -> None:
        """Apply a migration in a single remote call.

        Args:
            migration: Migration to apply

        Raises:
            RemoteExecutionError: If the backend rejects or fails the script
        """
        raise NotImplementedError


class SchemaService(Service):
    """Domain service for provisioning the remote schema."""

    def __init__(self, schema_client: SchemaClient) -> None:
        self.schema_client = schema_client

    async def apply(self, migration: Migration) -> Migration:
        """Apply a migration and record it as applied.

        Failures propagate unchanged; nothing is retried or rolled back.

        Args:
            migration: Migration to apply

        Returns:
            The applied migration
        """
        with logfire.span(
            "schema_service.apply",
            version=migration.version,
            checksum=migration.checksum,
        ):
            await self.schema_client.apply_migration(migration)
            logfire.info(
                "Migration applied",
                version=migration.version,
                name=migration.name,
            )
            return migration
