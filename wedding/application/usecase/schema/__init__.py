"""Schema use cases."""

from .bootstrap_schema import (
    BootstrapSchemaRequest,
    BootstrapSchemaResponse,
    BootstrapSchemaUseCase,
    read_script,
)

__all__ = [
    "BootstrapSchemaRequest",
    "BootstrapSchemaResponse",
    "BootstrapSchemaUseCase",
    "read_script",
]
