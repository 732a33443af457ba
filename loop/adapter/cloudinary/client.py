"""Cloudinary media store.

Uses Cloudinary's unsigned upload API with an upload preset, so no API
secret is needed on this side.
"""

import httpx
import logfire

from loop.adapter.error import MediaUploadError
from loop.domain.model.media import MediaUpload
from loop.domain.service.media_service import MediaStore
from loop.domain.value import MediaKind

# Cloudinary files audio under the video resource type
RESOURCE_TYPES = {
    MediaKind.IMAGE: "image",
    MediaKind.VIDEO: "video",
    MediaKind.AUDIO: "video",
    MediaKind.FILE: "raw",
}


class CloudinaryMediaStore(MediaStore):
    """Uploads files to Cloudinary."""

    def __init__(
        self, cloud_name: str, upload_preset: str, timeout: float = 60.0
    ) -> None:
        """Initialize media store.

        Args:
            cloud_name: Cloudinary cloud name
            upload_preset: Unsigned upload preset
            timeout: Upload timeout in seconds
        """
        self.cloud_name = cloud_name
        self.upload_preset = upload_preset
        self.timeout = timeout

    def upload_url(self, kind: MediaKind) -> str:
        return (
            f"https://api.cloudinary.com/v1_1/{self.cloud_name}/"
            f"{RESOURCE_TYPES[kind]}/upload"
        )

    async def upload(
        self, data: bytes, filename: str, content_type: str, kind: MediaKind
    ) -> MediaUpload:
        """Upload a file.

        Raises:
            MediaUploadError: If Cloudinary rejects the upload or is unreachable
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.upload_url(kind),
                    data={"upload_preset": self.upload_preset},
                    files={"file": (filename, data, content_type)},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Cloudinary upload HTTP error", kind=kind.value, error=str(e))
            raise MediaUploadError(f"HTTP error during upload: {e}")

        if response.status_code != 200:
            logfire.error(
                "Cloudinary upload failed",
                kind=kind.value,
                status_code=response.status_code,
                error=response.text,
            )
            raise MediaUploadError(f"Upload failed: {response.status_code}")

        result = response.json()
        return MediaUpload(
            url=result["secure_url"],
            kind=kind,
            width=result.get("width"),
            height=result.get("height"),
            duration=result.get("duration"),
            bytes=result.get("bytes"),
        )


class MockMediaStore(MediaStore):
    """Mock media store for testing.

    Returns deterministic URLs without making real API calls.
    """

    def __init__(self) -> None:
        self.uploads: list[tuple[str, str, MediaKind]] = []
        self.fail = False

    async def upload(
        self, data: bytes, filename: str, content_type: str, kind: MediaKind
    ) -> MediaUpload:
        if self.fail:
            raise MediaUploadError("Mock media store is down")

        self.uploads.append((filename, content_type, kind))
        return MediaUpload(
            url=f"https://res.cloudinary.com/mock/{kind.value}/upload/{filename}",
            kind=kind,
            width=640 if kind in (MediaKind.IMAGE, MediaKind.VIDEO) else None,
            height=480 if kind in (MediaKind.IMAGE, MediaKind.VIDEO) else None,
            duration=12.5 if kind in (MediaKind.VIDEO, MediaKind.AUDIO) else None,
            bytes=len(data),
        )
