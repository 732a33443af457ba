"""Upload media use case."""

from typing import Optional

from pydantic import BaseModel

from loop.application.usecase.base import parse_id
from loop.domain.service import MediaService
from loop.domain.value import MediaKind, UserId


class UploadMediaRequest(BaseModel):
    """Upload media request."""

    user_id: str  # User ID from authenticated user
    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None


class UploadMediaResponse(BaseModel):
    """Where the uploaded file lives."""

    url: str
    kind: MediaKind
    width: Optional[int]
    height: Optional[int]
    duration: Optional[float]


class UploadMediaUseCase:
    """Use case for uploading a file to the media store."""

    def __init__(self, media_service: MediaService) -> None:
        self.media_service = media_service

    async def execute(self, request: UploadMediaRequest) -> UploadMediaResponse:
        """Execute upload flow.

        Raises:
            ValidationError: If the file is empty or too large
            MediaUploadError: If the media store rejects the upload
        """
        uploaded = await self.media_service.upload(
            UserId(parse_id(request.user_id, "user_id")),
            request.data,
            request.filename,
            request.content_type,
        )
        return UploadMediaResponse(
            url=uploaded.url,
            kind=uploaded.kind,
            width=uploaded.width,
            height=uploaded.height,
            duration=uploaded.duration,
        )
