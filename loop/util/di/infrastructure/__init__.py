"""Infrastructure providers."""

# Import bases
from .auth import AuthProvider
from .media import MediaProvider
from .persistence import PersistenceProvider
from .realtime import RealtimeProvider

# Import implementations (needed for __subclasses__())
from .auth import ProdAuthProvider  # noqa: F401
from .media import ProdMediaProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .realtime import ProdRealtimeProvider  # noqa: F401

__all__ = [
    "AuthProvider",
    "MediaProvider",
    "PersistenceProvider",
    "RealtimeProvider",
    "ProdAuthProvider",
    "ProdMediaProvider",
    "ProdPersistenceProvider",
    "ProdRealtimeProvider",
]
