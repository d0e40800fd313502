"""
Get Post Like By Owner Use Case
===============================

Use case for checking whether a user liked a post.
"""
import logging
from typing import Optional

from social_posts.application.mappers.post_mapper import map_like_to_domain
from social_posts.domain.errors import GettingPostLikeError
from social_posts.domain.models.post import PostLike
from social_posts.domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class GetPostLikeByOwnerIdUseCase:
    """Use case for getting the like a user left on a post."""

    def __init__(self, post_repository: PostRepository):
        self._repository = post_repository

    def execute(self, post_id: str, owner_id: str) -> Optional[PostLike]:
        """
        Get the like of ``owner_id`` on ``post_id``.

        A missing post and a post the user has not liked both return None.

        Raises:
            GettingPostLikeError: If the data source fails
        """
        try:
            like = self._repository.get_post_like_by_owner_id(post_id, owner_id)
        except Exception as e:
            # Published message text, kept as clients know it
            message = f"Error retereaving post comment. {e}"
            logger.error(message)
            raise GettingPostLikeError(message) from e

        return map_like_to_domain(like) if like else None
