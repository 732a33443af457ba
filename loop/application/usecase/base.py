"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from loop.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str, field: str = "id") -> UUID:
    """Parse a UUID string from a request.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}")
