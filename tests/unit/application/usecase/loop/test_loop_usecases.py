"""Unit tests for the loop use cases."""

from uuid import uuid4

import pytest

from loop.application.usecase.loop import (
    CreateBranchRequest,
    CreateBranchUseCase,
    CreateLoopRequest,
    CreateLoopUseCase,
    DeleteLoopRequest,
    DeleteLoopUseCase,
    GetLoopRequest,
    GetLoopUseCase,
    ListBranchesRequest,
    ListBranchesUseCase,
)
from loop.domain.error import DepthLimitExceededError, NotFoundError, ValidationError
from loop.domain.value import ImageContent, TextContent
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateLoopUseCase:
    """Tests for CreateLoopUseCase."""

    @pytest.mark.asyncio
    async def test_create_loop_returns_item_with_zero_stats(self, unit_env):
        create_loop = await unit_env.get(CreateLoopUseCase)

        author_id = new_user_id()
        response = await create_loop.execute(
            CreateLoopRequest(
                author_id=str(author_id),
                content=ImageContent(image_url="https://img/1.png", caption="sunset"),
            )
        )

        assert response.loop.author_id == str(author_id)
        assert response.loop.depth == 0
        assert response.loop.parent_id is None
        assert response.loop.content.type == "image"
        assert response.loop.stats.likes == 0

    @pytest.mark.asyncio
    async def test_malformed_author_id_is_rejected(self, unit_env):
        create_loop = await unit_env.get(CreateLoopUseCase)

        with pytest.raises(ValidationError):
            await create_loop.execute(
                CreateLoopRequest(author_id="not-a-uuid", content=TextContent(text="x"))
            )


class TestBranchUseCases:
    """Tests for branching and listing branches."""

    @pytest.mark.asyncio
    async def test_branch_and_list(self, unit_env):
        create_loop = await unit_env.get(CreateLoopUseCase)
        create_branch = await unit_env.get(CreateBranchUseCase)
        list_branches = await unit_env.get(ListBranchesUseCase)
        get_loop = await unit_env.get(GetLoopUseCase)

        root = await create_loop.execute(
            CreateLoopRequest(author_id=str(new_user_id()), content=TextContent(text="a"))
        )
        for i in range(3):
            await create_branch.execute(
                CreateBranchRequest(
                    author_id=str(new_user_id()),
                    parent_id=root.loop.id,
                    content=TextContent(text=f"b{i}"),
                )
            )

        page = await list_branches.execute(
            ListBranchesRequest(loop_id=root.loop.id, limit=2)
        )
        detail = await get_loop.execute(GetLoopRequest(loop_id=root.loop.id))

        assert len(page.branches) == 2
        assert page.total == 2
        assert all(b.depth == 1 for b in page.branches)
        assert detail.loop.stats.branches == 3

    @pytest.mark.asyncio
    async def test_branch_depth_limit(self, unit_env):
        create_loop = await unit_env.get(CreateLoopUseCase)
        create_branch = await unit_env.get(CreateBranchUseCase)

        author_id = str(new_user_id())
        node = await create_loop.execute(
            CreateLoopRequest(author_id=author_id, content=TextContent(text="root"))
        )
        for _ in range(10):
            node = await create_branch.execute(
                CreateBranchRequest(
                    author_id=author_id,
                    parent_id=node.loop.id,
                    content=TextContent(text="deeper"),
                )
            )

        assert node.loop.depth == 10
        with pytest.raises(DepthLimitExceededError):
            await create_branch.execute(
                CreateBranchRequest(
                    author_id=author_id,
                    parent_id=node.loop.id,
                    content=TextContent(text="too deep"),
                )
            )


class TestGetAndDeleteLoop:
    """Tests for reading and deleting loops."""

    @pytest.mark.asyncio
    async def test_malformed_loop_id_is_not_found(self, unit_env):
        get_loop = await unit_env.get(GetLoopUseCase)

        with pytest.raises(NotFoundError):
            await get_loop.execute(GetLoopRequest(loop_id="nope"))

    @pytest.mark.asyncio
    async def test_delete_then_get_raises_not_found(self, unit_env):
        create_loop = await unit_env.get(CreateLoopUseCase)
        delete_loop = await unit_env.get(DeleteLoopUseCase)
        get_loop = await unit_env.get(GetLoopUseCase)

        author_id = str(new_user_id())
        created = await create_loop.execute(
            CreateLoopRequest(author_id=author_id, content=TextContent(text="bye"))
        )

        response = await delete_loop.execute(
            DeleteLoopRequest(loop_id=created.loop.id, requester_id=author_id)
        )

        assert response.success is True
        assert response.deleted == 1
        with pytest.raises(NotFoundError):
            await get_loop.execute(GetLoopRequest(loop_id=created.loop.id))

    @pytest.mark.asyncio
    async def test_list_branches_of_missing_loop(self, unit_env):
        list_branches = await unit_env.get(ListBranchesUseCase)

        with pytest.raises(NotFoundError):
            await list_branches.execute(ListBranchesRequest(loop_id=str(uuid4())))
