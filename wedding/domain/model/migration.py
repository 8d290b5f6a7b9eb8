"""Schema migration model.

A migration is a versioned SQL script. Applying it runs the script and
records the version in ``public.schema_migrations`` in the same remote
call, so the database reports which schema it carries.
"""

import hashlib

from pydantic import Field, computed_field, field_validator

from wedding.domain.model.common import DomainModel

LEDGER_TABLE = "public.schema_migrations"

_LEDGER_DDL = f"""create table if not exists {LEDGER_TABLE} (
    version text primary key,
    name text not null,
    checksum text not null,
    applied_at timestamptz not null default now()
);"""


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


class Migration(DomainModel):
    """A versioned schema script."""

    version: str = Field(pattern=r"^[A-Za-z0-9_.-]{1,100}$")
    name: str = Field(min_length=1, max_length=200)
    sql: str

    @field_validator("sql")
    @classmethod
    def require_statements(cls, v: str) -> str:
        if not v:
            raise ValueError("Migration script is empty")
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def checksum(self) -> str:
        """SHA-256 of the script text."""
        return hashlib.sha256(self.sql.encode("utf-8")).hexdigest()

    def statement(self) -> str:
        """Script followed by the ledger upsert, as one SQL text."""
        script = self.sql.rstrip()
        if not script.endswith(";"):
            script += ";"
        record = (
            f"insert into {LEDGER_TABLE} (version, name, checksum)\n"
            f"values ({_quote(self.version)}, {_quote(self.name)}, "
            f"{_quote(self.checksum)})\n"
            "on conflict (version) do update\n"
            "    set checksum = excluded.checksum, applied_at = now();"
        )
        return f"{script}\n\n{_LEDGER_DDL}\n\n{record}\n"
