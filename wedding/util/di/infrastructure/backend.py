"""Backend-as-a-service infrastructure providers."""

from dishka import Scope, provide

from wedding.adapter.backend import BackendSchemaClient, RealBackendSchemaClient
from wedding.config import BackendSettings
from wedding.util.di.base import ProviderBase


class BackendProvider(ProviderBase):
    """Backend component base."""

    __mock_component__ = "backend"


class ProdBackendProvider(BackendProvider):
    """Production backend provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_schema_client(self, backend: BackendSettings) -> BackendSchemaClient:
        """Provide backend schema client.

        Raises:
            ConfigurationError: If the backend URL or access key is missing
        """
        backend.require_credentials()
        return RealBackendSchemaClient(
            url=backend.url,
            api_key=backend.api_key,
            rpc_function=backend.rpc_function,
            timeout=backend.timeout,
        )
