"""Live stream domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from loop.domain.error import ForbiddenError, NotFoundError, ValidationError
from loop.domain.model.side_effect import Broadcast, NotifyMany
from loop.domain.model.stream import LiveStream
from loop.domain.repository import FollowRepository, LiveStreamRepository
from loop.domain.value import NotificationType, StreamId, UserId

from .base import Service
from .profile_service import ProfileService
from .side_effect_service import SideEffectDispatcher

LIVE_ROOM = "live_notifications"


class StreamService(Service):
    """Domain service for live streams."""

    def __init__(
        self,
        stream_repository: LiveStreamRepository,
        follow_repository: FollowRepository,
        profile_service: ProfileService,
        dispatcher: SideEffectDispatcher,
    ) -> None:
        """Initialize stream service.

        Args:
            stream_repository: Live stream repository
            follow_repository: Follower lookups for fan-out
            profile_service: Streamer names for notifications
            dispatcher: Side-effect dispatcher
        """
        self.stream_repository = stream_repository
        self.follow_repository = follow_repository
        self.profile_service = profile_service
        self.dispatcher = dispatcher

    async def create(
        self, streamer_id: UserId, title: str, category: Optional[str] = None
    ) -> LiveStream:
        """Create a stream that is not yet live."""
        with logfire.span("stream_service.create", streamer_id=str(streamer_id)):
            stream = LiveStream(
                id=StreamId(uuid4()),
                streamer_id=streamer_id,
                title=title,
                category=category,
                is_live=False,
                created_at=datetime.now(),
            )
            return await self.stream_repository.save(stream)

    async def get(self, stream_id: StreamId) -> LiveStream:
        stream = await self.stream_repository.find_by_id(stream_id)
        if stream is None:
            raise NotFoundError("Stream", str(stream_id))
        return stream

    async def start(self, stream_id: StreamId, requester_id: UserId) -> int:
        """Go live and tell every follower.

        Returns:
            Number of followers notified

        Raises:
            NotFoundError: If the stream does not exist
            ForbiddenError: If the requester is not the streamer
            ValidationError: If the stream is already live
        """
        with logfire.span(
            "stream_service.start",
            stream_id=str(stream_id),
            requester_id=str(requester_id),
        ):
            stream = await self._owned(stream_id, requester_id, "start")
            if stream.is_live:
                raise ValidationError("Stream is already live")

            live = await self.stream_repository.save(
                stream.model_copy(
                    update={"is_live": True, "started_at": datetime.now(), "ended_at": None}
                )
            )

            follower_ids = await self.follow_repository.find_follower_ids(
                live.streamer_id
            )
            name = await self.profile_service.display_name(live.streamer_id)
            data = {
                "stream_id": str(live.id),
                "streamer_id": str(live.streamer_id),
                "stream_title": live.title,
            }
            effects = []
            if follower_ids:
                effects.append(
                    NotifyMany(
                        recipient_ids=follower_ids,
                        type=NotificationType.LIVE_STREAM_STARTED,
                        title=f"{name} is now live!",
                        message=live.title,
                        data=data,
                    )
                )
            effects.append(
                Broadcast(
                    room=LIVE_ROOM,
                    event="live_stream_started",
                    payload={**data, "follower_ids": [str(f) for f in follower_ids]},
                )
            )
            await self.dispatcher.dispatch_all(effects)

            logfire.info(
                "Stream started", stream_id=str(stream_id), followers=len(follower_ids)
            )
            return len(follower_ids)

    async def end(self, stream_id: StreamId, requester_id: UserId) -> LiveStream:
        """End a live stream.

        Raises:
            NotFoundError: If the stream does not exist
            ForbiddenError: If the requester is not the streamer
        """
        with logfire.span(
            "stream_service.end", stream_id=str(stream_id), requester_id=str(requester_id)
        ):
            stream = await self._owned(stream_id, requester_id, "end")
            ended = await self.stream_repository.save(
                stream.model_copy(update={"is_live": False, "ended_at": datetime.now()})
            )
            await self.dispatcher.dispatch(
                Broadcast(
                    room=LIVE_ROOM,
                    event="live_stream_ended",
                    payload={"stream_id": str(stream_id)},
                )
            )
            return ended

    async def _owned(
        self, stream_id: StreamId, requester_id: UserId, action: str
    ) -> LiveStream:
        stream = await self.get(stream_id)
        if stream.streamer_id != requester_id:
            raise ForbiddenError(action, "stream", str(stream_id), str(requester_id))
        return stream
