"""Media upload domain service."""

from typing import Optional

import logfire

from loop.config import CloudinarySettings
from loop.domain.error import ValidationError
from loop.domain.model.media import MediaUpload
from loop.domain.value import MediaKind, UserId

from .base import Service


class MediaStore:
    """Generic media store interface."""

    async def upload(
        self, data: bytes, filename: str, content_type: str, kind: MediaKind
    ) -> MediaUpload:
        """Store a file and describe where it lives.

        Args:
            data: File contents
            filename: Original file name
            content_type: MIME type
            kind: Media family

        Returns:
            Stored media descriptor
        """
        raise NotImplementedError


class MediaService(Service):
    """Validates uploads and hands them to the media store."""

    def __init__(self, media_store: MediaStore, settings: CloudinarySettings) -> None:
        """Initialize media service.

        Args:
            media_store: Media store implementation
            settings: Upload size limits
        """
        self.media_store = media_store
        self.limits = {
            MediaKind.IMAGE: settings.max_image_bytes,
            MediaKind.VIDEO: settings.max_video_bytes,
            MediaKind.AUDIO: settings.max_audio_bytes,
            MediaKind.FILE: settings.max_file_bytes,
        }

    async def upload(
        self,
        user_id: UserId,
        data: bytes,
        filename: Optional[str],
        content_type: Optional[str],
    ) -> MediaUpload:
        """Upload a file for a user.

        Raises:
            ValidationError: If the file is empty or too large for its kind
        """
        kind = MediaKind.from_content_type(content_type)
        with logfire.span(
            "media_service.upload",
            user_id=str(user_id),
            kind=kind.value,
            size=len(data),
        ):
            if not data:
                raise ValidationError("No file provided")

            limit = self.limits[kind]
            if len(data) > limit:
                raise ValidationError(
                    f"File too large. Maximum size for {kind.value} is "
                    f"{limit // (1024 * 1024)}MB"
                )

            uploaded = await self.media_store.upload(
                data,
                filename or "upload",
                content_type or "application/octet-stream",
                kind,
            )
            logfire.info("Media uploaded", user_id=str(user_id), url=uploaded.url)
            return uploaded
