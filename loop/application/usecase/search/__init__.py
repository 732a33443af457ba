"""Search use cases."""

from loop.application.usecase.search.search import (
    SearchRequest,
    SearchResponse,
    SearchUseCase,
)

__all__ = ["SearchRequest", "SearchResponse", "SearchUseCase"]
