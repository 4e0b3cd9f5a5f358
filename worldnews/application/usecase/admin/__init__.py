"""Admin use cases."""

from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .list_all_posts import (
    ListAllPostsRequest,
    ListAllPostsResponse,
    ListAllPostsUseCase,
)
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .set_user_active import (
    SetUserActiveRequest,
    SetUserActiveResponse,
    SetUserActiveUseCase,
)

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "ListAllPostsRequest",
    "ListAllPostsResponse",
    "ListAllPostsUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "SetUserActiveRequest",
    "SetUserActiveResponse",
    "SetUserActiveUseCase",
]
