"""Supabase adapters (auth token validation, realtime broadcast)."""

from .auth import MockTokenValidator, SupabaseTokenValidator
from .realtime import MockRealtimeTransport, SupabaseRealtimeTransport

__all__ = [
    "MockRealtimeTransport",
    "MockTokenValidator",
    "SupabaseRealtimeTransport",
    "SupabaseTokenValidator",
]
