"""Backend-as-a-service adapter."""

from .client import (
    BackendSchemaClient,
    MockBackendSchemaClient,
    RealBackendSchemaClient,
)

__all__ = [
    "BackendSchemaClient",
    "RealBackendSchemaClient",
    "MockBackendSchemaClient",
]
