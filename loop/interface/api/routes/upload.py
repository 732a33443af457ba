"""Media upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Header, UploadFile

from loop.application.usecase.media import (
    UploadMediaRequest,
    UploadMediaResponse,
    UploadMediaUseCase,
)
from loop.domain.service import AuthService
from loop.interface.api.auth import require_user_id

router = APIRouter(tags=["media"], route_class=DishkaRoute)


@router.post("/upload", response_model=UploadMediaResponse)
async def upload_media(
    upload_media_use_case: FromDishka[UploadMediaUseCase],
    auth_service: FromDishka[AuthService],
    file: UploadFile = File(...),
    authorization: str | None = Header(default=None),
) -> UploadMediaResponse:
    """Upload a file to the media store.

    Requires authentication. The media kind is taken from the file's
    content type; size limits depend on the kind.

    Args:
        upload_media_use_case: Upload media use case from DI
        auth_service: Auth service for token verification (injected)
        file: Multipart file
        authorization: Bearer token header

    Returns:
        URL and metadata of the stored file
    """
    user_id = await require_user_id(auth_service, authorization)
    data = await file.read()
    return await upload_media_use_case.execute(
        UploadMediaRequest(
            user_id=user_id,
            data=data,
            filename=file.filename,
            content_type=file.content_type,
        )
    )
