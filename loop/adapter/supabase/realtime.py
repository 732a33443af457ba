"""Supabase Realtime broadcast client.

Publishes broadcast messages through the Realtime REST endpoint, so the API
server needs no websocket connection of its own.
"""

import asyncio
from typing import Any

import httpx
import logfire

from loop.adapter.error import RealtimeError
from loop.domain.service.side_effect_service import RealtimeTransport


class SupabaseRealtimeTransport(RealtimeTransport):
    """Broadcasts events to Supabase Realtime channels."""

    def __init__(self, url: str, service_role_key: str, timeout: float = 5.0) -> None:
        """Initialize transport.

        Args:
            url: Supabase project URL
            service_role_key: Service role key used to authorize broadcasts
            timeout: Request timeout in seconds
        """
        self.broadcast_url = f"{url.rstrip('/')}/realtime/v1/api/broadcast"
        self.service_role_key = service_role_key
        self.timeout = timeout

    async def broadcast(self, room: str, event: str, payload: dict[str, Any]) -> None:
        """Publish an event to a channel.

        Raises:
            RealtimeError: If Supabase rejects the message or is unreachable
        """
        body = {"messages": [{"topic": room, "event": event, "payload": payload}]}
        headers = {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.broadcast_url,
                    json=body,
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Realtime broadcast HTTP error", room=room, error=str(e))
            raise RealtimeError(f"HTTP error during broadcast: {e}")

        if response.status_code >= 300:
            logfire.error(
                "Realtime broadcast rejected",
                room=room,
                event=event,
                status_code=response.status_code,
                error=response.text,
            )
            raise RealtimeError(f"Broadcast failed: {response.status_code}")

        logfire.debug("Realtime broadcast sent", room=room, event=event)


class MockRealtimeTransport(RealtimeTransport):
    """Mock transport for testing.

    Records every broadcast. Set `fail` to make broadcasts raise and `delay`
    to make them slow.
    """

    def __init__(self) -> None:
        self.sent: list[tuple[str, str, dict[str, Any]]] = []
        self.fail = False
        self.delay = 0.0

    async def broadcast(self, room: str, event: str, payload: dict[str, Any]) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise RealtimeError("Mock realtime transport is down")
        self.sent.append((room, event, payload))

    def events(self, room: str) -> list[str]:
        """Event names sent to a room, in order."""
        return [event for r, event, _ in self.sent if r == room]
