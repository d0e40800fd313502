"""
Post Use Cases
==============
"""
from .create_post import CreatePostUseCase
from .create_post_comment import CreatePostCommentUseCase
from .get_post_like_by_owner_id import GetPostLikeByOwnerIdUseCase
from .get_posts import GetPostsUseCase, GetPostByIdUseCase, GetPostCommentUseCase
from .like_post import LikePostUseCase, DislikePostUseCase

__all__ = [
    "CreatePostUseCase",
    "CreatePostCommentUseCase",
    "GetPostLikeByOwnerIdUseCase",
    "GetPostsUseCase",
    "GetPostByIdUseCase",
    "GetPostCommentUseCase",
    "LikePostUseCase",
    "DislikePostUseCase",
]
