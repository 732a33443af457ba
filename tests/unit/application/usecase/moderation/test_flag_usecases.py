"""Unit tests for moderation use cases."""

import pytest

from loop.application.usecase.moderation import (
    CreateFlagRequest,
    CreateFlagUseCase,
    ListFlagsRequest,
    ListFlagsUseCase,
    ResolveFlagRequest,
    ResolveFlagUseCase,
)
from loop.domain.error import ValidationError
from loop.domain.repository import ProfileRepository
from loop.domain.service import LoopService
from loop.domain.value import FlagReason, FlagStatus, FlagTarget
from tests.conftest import make_profile, new_user_id, text
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFlagUseCases:
    """Tests for create, list and resolve flag use cases."""

    @pytest.mark.asyncio
    async def test_flag_lifecycle_response_shape(self, unit_env):
        create_flag = await unit_env.get(CreateFlagUseCase)
        list_flags = await unit_env.get(ListFlagsUseCase)
        resolve_flag = await unit_env.get(ResolveFlagUseCase)
        loop_service = await unit_env.get(LoopService)
        profile_repo = await unit_env.get(ProfileRepository)

        mod = await make_profile(profile_repo, "queue_keeper", is_moderator=True)
        loop = await loop_service.create_root(new_user_id(), text())

        created = await create_flag.execute(
            CreateFlagRequest(
                reporter_id=str(new_user_id()),
                target_type=FlagTarget.LOOP,
                target_id=str(loop.id),
                reason=FlagReason.HATE_SPEECH,
            )
        )
        queue = await list_flags.execute(ListFlagsRequest(requester_id=str(mod.id)))
        resolved = await resolve_flag.execute(
            ResolveFlagRequest(
                moderator_id=str(mod.id),
                flag_id=created.flag.id,
                status=FlagStatus.DISMISSED,
            )
        )

        assert created.flag.target_id == str(loop.id)
        assert created.flag.description == ""
        assert [f.id for f in queue.flags] == [created.flag.id]
        assert resolved.flag.status == FlagStatus.DISMISSED
        assert resolved.flag.moderator_id == str(mod.id)

    @pytest.mark.asyncio
    async def test_malformed_target_id_is_rejected(self, unit_env):
        create_flag = await unit_env.get(CreateFlagUseCase)

        with pytest.raises(ValidationError):
            await create_flag.execute(
                CreateFlagRequest(
                    reporter_id=str(new_user_id()),
                    target_type=FlagTarget.LOOP,
                    target_id="not-a-uuid",
                    reason=FlagReason.SPAM,
                )
            )
