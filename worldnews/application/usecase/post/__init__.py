"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_user_posts import (
    ListUserPostsRequest,
    ListUserPostsResponse,
    ListUserPostsUseCase,
)
from .set_post_active import (
    SetPostActiveRequest,
    SetPostActiveResponse,
    SetPostActiveUseCase,
)
from .share_post import SharePostRequest, SharePostResponse, SharePostUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListUserPostsRequest",
    "ListUserPostsResponse",
    "ListUserPostsUseCase",
    "SetPostActiveRequest",
    "SetPostActiveResponse",
    "SetPostActiveUseCase",
    "SharePostRequest",
    "SharePostResponse",
    "SharePostUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
