"""Interaction use cases."""

from loop.application.usecase.interaction.get_interactions import (
    GetInteractionsRequest,
    GetInteractionsResponse,
    GetInteractionsUseCase,
)
from loop.application.usecase.interaction.interact import (
    InteractRequest,
    InteractResponse,
    InteractUseCase,
)

__all__ = [
    "InteractRequest",
    "InteractResponse",
    "InteractUseCase",
    "GetInteractionsRequest",
    "GetInteractionsResponse",
    "GetInteractionsUseCase",
]
