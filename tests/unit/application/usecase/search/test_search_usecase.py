"""Unit tests for SearchUseCase."""

import pytest

from loop.application.usecase.search import SearchRequest, SearchUseCase
from loop.domain.error import ValidationError
from loop.domain.repository import ProfileRepository
from loop.domain.service import CounterService, LoopService
from loop.domain.value import (
    ImageContent,
    InteractionType,
    SearchScope,
    TextContent,
    Visibility,
)
from tests.conftest import make_profile, new_user_id, text
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSearchUseCase:
    """Tests for SearchUseCase."""

    @pytest.mark.asyncio
    async def test_matches_loop_text_fields_case_insensitively(self, unit_env):
        search = await unit_env.get(SearchUseCase)
        loop_service = await unit_env.get(LoopService)

        author = new_user_id()
        in_text = await loop_service.create_root(author, text("Late night SYNTHWAVE jam"))
        in_title = await loop_service.create_root(
            author, TextContent(text="tracklist", title="Synthwave classics")
        )
        in_caption = await loop_service.create_root(
            author, ImageContent(image_url="https://cdn/x.png", caption="synthwave cover")
        )
        await loop_service.create_root(author, text("acoustic folk"))

        response = await search.execute(
            SearchRequest(q="synthwave", scope=SearchScope.LOOPS)
        )

        assert {item.id for item in response.loops} == {
            str(in_text.id),
            str(in_title.id),
            str(in_caption.id),
        }
        assert response.users == []
        assert response.total == 3

    @pytest.mark.asyncio
    async def test_private_loops_are_not_found(self, unit_env):
        search = await unit_env.get(SearchUseCase)
        loop_service = await unit_env.get(LoopService)

        await loop_service.create_root(
            new_user_id(), text("secret recipe"), visibility=Visibility.PRIVATE
        )

        response = await search.execute(SearchRequest(q="recipe"))

        assert response.loops == []

    @pytest.mark.asyncio
    async def test_matches_profiles_by_username_and_display_name(self, unit_env):
        search = await unit_env.get(SearchUseCase)
        profile_repo = await unit_env.get(ProfileRepository)

        by_username = await make_profile(profile_repo, "beatmaker_99")
        by_name = await make_profile(profile_repo, "someone", display_name="The Beatmaker")
        await make_profile(profile_repo, "unrelated")

        response = await search.execute(
            SearchRequest(q="BEATMAKER", scope=SearchScope.USERS)
        )

        assert [u.id for u in response.users] == [str(by_username.id), str(by_name.id)]
        assert response.loops == []

    @pytest.mark.asyncio
    async def test_all_scope_returns_both_sections(self, unit_env):
        search = await unit_env.get(SearchUseCase)
        loop_service = await unit_env.get(LoopService)
        profile_repo = await unit_env.get(ProfileRepository)

        await make_profile(profile_repo, "jazz_cat")
        await loop_service.create_root(new_user_id(), text("smooth jazz loop"))

        response = await search.execute(SearchRequest(q="jazz"))

        assert len(response.loops) == 1
        assert len(response.users) == 1
        assert response.total == 2

    @pytest.mark.asyncio
    async def test_loop_results_carry_viewer_state(self, unit_env):
        search = await unit_env.get(SearchUseCase)
        loop_service = await unit_env.get(LoopService)
        counter_service = await unit_env.get(CounterService)

        viewer = new_user_id()
        loop = await loop_service.create_root(new_user_id(), text("drum break"))
        await counter_service.toggle(viewer, loop.id, InteractionType.LIKE)

        response = await search.execute(
            SearchRequest(q="drum", scope=SearchScope.LOOPS, viewer_id=str(viewer))
        )

        assert response.loops[0].viewer.is_liked is True
        assert response.loops[0].stats.likes == 1

    @pytest.mark.asyncio
    async def test_wildcards_are_matched_literally(self, unit_env):
        search = await unit_env.get(SearchUseCase)
        loop_service = await unit_env.get(LoopService)

        await loop_service.create_root(new_user_id(), text("100% vinyl"))
        await loop_service.create_root(new_user_id(), text("100 vinyl records"))

        response = await search.execute(SearchRequest(q="0% v"))

        assert len(response.loops) == 1

    @pytest.mark.asyncio
    async def test_short_or_blank_query_is_rejected(self, unit_env):
        search = await unit_env.get(SearchUseCase)

        for q in ("", "   ", "a"):
            with pytest.raises(ValidationError):
                await search.execute(SearchRequest(q=q))
