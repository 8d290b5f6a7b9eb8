"""Infrastructure providers."""

# Import bases
from .backend import BackendProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .backend import ProdBackendProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "BackendProvider",
    "PersistenceProvider",
    "ProdBackendProvider",
    "ProdPersistenceProvider",
]
