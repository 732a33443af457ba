"""Unit tests for MediaService."""

import pytest

from loop.adapter.error import MediaUploadError
from loop.domain.error import ValidationError
from loop.domain.service import MediaService, MediaStore
from loop.domain.value import MediaKind
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestMediaService:
    """Tests for MediaService."""

    @pytest.mark.asyncio
    async def test_upload_image(self, unit_env):
        media_service = await unit_env.get(MediaService)

        uploaded = await media_service.upload(
            new_user_id(), b"\x89PNG...", "cover.png", "image/png"
        )

        assert uploaded.kind == MediaKind.IMAGE
        assert uploaded.url.endswith("/image/upload/cover.png")
        assert uploaded.width == 640

    @pytest.mark.asyncio
    async def test_unknown_type_is_stored_as_file(self, unit_env):
        media_service = await unit_env.get(MediaService)

        uploaded = await media_service.upload(new_user_id(), b"data", None, None)

        assert uploaded.kind == MediaKind.FILE
        assert uploaded.url.endswith("/upload")

    @pytest.mark.asyncio
    async def test_empty_upload_is_rejected(self, unit_env):
        media_service = await unit_env.get(MediaService)

        with pytest.raises(ValidationError):
            await media_service.upload(new_user_id(), b"", "a.mp3", "audio/mpeg")

    @pytest.mark.asyncio
    async def test_oversized_upload_is_rejected(self, unit_env):
        media_service = await unit_env.get(MediaService)

        too_big = b"0" * (10 * 1024 * 1024 + 1)
        with pytest.raises(ValidationError) as exc_info:
            await media_service.upload(new_user_id(), too_big, "big.jpg", "image/jpeg")

        assert "10MB" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_store_failures_propagate(self, unit_env):
        media_service = await unit_env.get(MediaService)
        store = await unit_env.get(MediaStore)
        store.fail = True

        with pytest.raises(MediaUploadError):
            await media_service.upload(new_user_id(), b"x", "a.png", "image/png")
