"""Loop use cases."""

from loop.application.usecase.loop.create_branch import (
    CreateBranchRequest,
    CreateBranchResponse,
    CreateBranchUseCase,
)
from loop.application.usecase.loop.create_loop import (
    CreateLoopRequest,
    CreateLoopResponse,
    CreateLoopUseCase,
)
from loop.application.usecase.loop.delete_loop import (
    DeleteLoopRequest,
    DeleteLoopResponse,
    DeleteLoopUseCase,
)
from loop.application.usecase.loop.get_loop import (
    GetLoopRequest,
    GetLoopResponse,
    GetLoopUseCase,
)
from loop.application.usecase.loop.list_branches import (
    ListBranchesRequest,
    ListBranchesResponse,
    ListBranchesUseCase,
)
from loop.application.usecase.loop.view import LoopItem, LoopStatsInfo, ViewerStateInfo

__all__ = [
    "CreateLoopRequest",
    "CreateLoopResponse",
    "CreateLoopUseCase",
    "CreateBranchRequest",
    "CreateBranchResponse",
    "CreateBranchUseCase",
    "GetLoopRequest",
    "GetLoopResponse",
    "GetLoopUseCase",
    "ListBranchesRequest",
    "ListBranchesResponse",
    "ListBranchesUseCase",
    "DeleteLoopRequest",
    "DeleteLoopResponse",
    "DeleteLoopUseCase",
    "LoopItem",
    "LoopStatsInfo",
    "ViewerStateInfo",
]
