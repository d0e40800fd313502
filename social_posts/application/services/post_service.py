"""
Post Service
============

Application service that coordinates post-related operations.
This service orchestrates the post use cases.
"""
from typing import List, Optional

from social_posts.domain.models.post import Post, PostComment, PostLike, PostOwner
from social_posts.domain.repositories.post_repository import PostRepository
from social_posts.application.use_cases.post import (
    CreatePostUseCase,
    CreatePostCommentUseCase,
    GetPostLikeByOwnerIdUseCase,
    GetPostsUseCase,
    GetPostByIdUseCase,
    GetPostCommentUseCase,
    LikePostUseCase,
    DislikePostUseCase,
)


class PostService:
    """
    Application service for post operations.

    This service is the single translation point between data source
    failures and typed post errors (see social_posts.domain.errors).
    """

    def __init__(self, post_repository: PostRepository):
        """
        Initialize service with repository.

        Args:
            post_repository: Repository for post persistence
        """
        self._create_post_use_case = CreatePostUseCase(post_repository)
        self._create_comment_use_case = CreatePostCommentUseCase(post_repository)
        self._get_like_use_case = GetPostLikeByOwnerIdUseCase(post_repository)
        self._get_posts_use_case = GetPostsUseCase(post_repository)
        self._get_post_use_case = GetPostByIdUseCase(post_repository)
        self._get_comment_use_case = GetPostCommentUseCase(post_repository)
        self._like_use_case = LikePostUseCase(post_repository)
        self._dislike_use_case = DislikePostUseCase(post_repository)

    def create_post(self, owner: PostOwner, body: str) -> Post:
        """
        Create a post.

        Args:
            owner: Owner snapshot of the author
            body: Post text

        Returns:
            Created post, with no comments and no likes

        Raises:
            CreatingPostError: If the post could not be persisted
        """
        return self._create_post_use_case.execute(owner, body)

    def create_post_comment(self, post_id: str, comment_body: str, comment_owner: PostOwner) -> Post:
        """
        Append a comment to a post.

        Returns:
            The updated post

        Raises:
            CreatingPostCommentError: If the comment could not be stored
        """
        return self._create_comment_use_case.execute(post_id, comment_body, comment_owner)

    def get_post_like_by_owner_id(self, post_id: str, owner_id: str) -> Optional[PostLike]:
        """
        Get the like a user left on a post.

        Returns:
            The like, or None if the post does not exist or the user has not liked it

        Raises:
            GettingPostLikeError: If the lookup fails
        """
        return self._get_like_use_case.execute(post_id, owner_id)

    def get_posts(self) -> List[Post]:
        return self._get_posts_use_case.execute()

    def get_post_by_id(self, post_id: str) -> Optional[Post]:
        return self._get_post_use_case.execute(post_id)

    def get_post_comment(self, post_id: str, comment_id: str) -> Optional[PostComment]:
        return self._get_comment_use_case.execute(post_id, comment_id)

    def like_post(self, post_id: str, like_owner: PostLike) -> Post:
        """Like a post as ``like_owner``. Raises LikingPostError on failure."""
        return self._like_use_case.execute(post_id, like_owner)

    def dislike_post(self, post_id: str, owner_id: str) -> Post:
        """Remove the like of ``owner_id``. Raises DislikingPostError on failure."""
        return self._dislike_use_case.execute(post_id, owner_id)
