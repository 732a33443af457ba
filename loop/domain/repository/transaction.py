"""Transaction port."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Nested transaction control over the current unit of work."""

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Open a savepoint that rolls back alone if its block raises.

        The outer transaction stays usable after the rollback.
        """
        pass

    @abstractmethod
    def mark_rollback_only(self) -> None:
        """Discard the unit of work when it ends instead of committing it.

        Used when a request fails after its handler returned control, e.g. it
        timed out or was answered with an error response.
        """
        pass
