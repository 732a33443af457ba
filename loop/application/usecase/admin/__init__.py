"""Admin use cases."""

from loop.application.usecase.admin.set_capabilities import (
    SetCapabilitiesRequest,
    SetCapabilitiesResponse,
    SetCapabilitiesUseCase,
)

__all__ = [
    "SetCapabilitiesRequest",
    "SetCapabilitiesResponse",
    "SetCapabilitiesUseCase",
]
