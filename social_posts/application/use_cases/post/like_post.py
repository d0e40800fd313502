"""
Like / Dislike Post Use Cases
=============================

Business use cases for adding and removing likes.
"""
import logging

from social_posts.application.mappers.post_mapper import map_like_to_record, map_post_to_domain
from social_posts.domain.errors import DislikingPostError, LikingPostError
from social_posts.domain.errors.post_errors import NULL_RESULT_SUFFIX
from social_posts.domain.models.post import Post, PostLike
from social_posts.domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class LikePostUseCase:
    """
    Use case for liking a post.

    Likes are keyed by the owner id: liking twice refreshes the stored
    snapshot instead of adding a second like.
    """

    def __init__(self, post_repository: PostRepository):
        self._repository = post_repository

    def execute(self, post_id: str, like_owner: PostLike) -> Post:
        """
        Raises:
            LikingPostError: If the post is missing or the like could not be stored
        """
        error_prefix = f"Error liking post '{post_id}' by user '{like_owner.id}'."

        try:
            updated_post = self._repository.like_post(post_id, map_like_to_record(like_owner))
        except Exception as e:
            logger.error(f"{error_prefix} {e}")
            raise LikingPostError(f"{error_prefix} {e}") from e

        if updated_post is None:
            message = f"{error_prefix} Post like process {NULL_RESULT_SUFFIX}"
            logger.error(message)
            raise LikingPostError(message)

        logger.info(f"User {like_owner.id} liked post {post_id}")
        return map_post_to_domain(updated_post)


class DislikePostUseCase:
    """Use case for removing a user's like from a post."""

    def __init__(self, post_repository: PostRepository):
        self._repository = post_repository

    def execute(self, post_id: str, owner_id: str) -> Post:
        """
        Raises:
            DislikingPostError: If the post is missing or the like could not be removed
        """
        error_prefix = f"Error disliking post '{post_id}' by user '{owner_id}'."

        try:
            updated_post = self._repository.dislike_post(post_id, owner_id)
        except Exception as e:
            logger.error(f"{error_prefix} {e}")
            raise DislikingPostError(f"{error_prefix} {e}") from e

        if updated_post is None:
            message = f"{error_prefix} Post dislike process {NULL_RESULT_SUFFIX}"
            logger.error(message)
            raise DislikingPostError(message)

        logger.info(f"User {owner_id} disliked post {post_id}")
        return map_post_to_domain(updated_post)
