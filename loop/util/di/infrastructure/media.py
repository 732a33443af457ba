"""Media infrastructure providers."""

from dishka import Scope, provide

from loop.adapter.cloudinary.client import CloudinaryMediaStore
from loop.config import CloudinarySettings
from loop.domain.service import MediaStore
from loop.util.di.base import ProviderBase


class MediaProvider(ProviderBase):
    """Media component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider backed by Cloudinary."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_store(self, cloudinary_settings: CloudinarySettings) -> MediaStore:
        """Provide Cloudinary media store."""
        return CloudinaryMediaStore(
            cloud_name=cloudinary_settings.cloud_name,
            upload_preset=cloudinary_settings.upload_preset,
        )
