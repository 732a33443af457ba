"""Media use cases."""

from loop.application.usecase.media.upload_media import (
    UploadMediaRequest,
    UploadMediaResponse,
    UploadMediaUseCase,
)

__all__ = ["UploadMediaRequest", "UploadMediaResponse", "UploadMediaUseCase"]
