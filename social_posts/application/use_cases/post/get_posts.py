"""
Get Posts Use Cases
===================

Read-only use cases over posts and their comments.
"""
import logging
from typing import List, Optional

from social_posts.application.mappers.post_mapper import map_comment_to_domain, map_post_to_domain
from social_posts.domain.errors import GettingPostCommentError, GettingPostError
from social_posts.domain.models.post import Post, PostComment
from social_posts.domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class GetPostsUseCase:
    """List every post."""

    def __init__(self, post_repository: PostRepository):
        self._repository = post_repository

    def execute(self) -> List[Post]:
        try:
            posts = self._repository.get_posts()
        except Exception as e:
            message = f"Error retrieving posts. {e}"
            logger.error(message)
            raise GettingPostError(message) from e

        return [map_post_to_domain(post) for post in posts]


class GetPostByIdUseCase:
    """Get a single post, None when it does not exist."""

    def __init__(self, post_repository: PostRepository):
        self._repository = post_repository

    def execute(self, post_id: str) -> Optional[Post]:
        try:
            post = self._repository.get_post_by_id(post_id)
        except Exception as e:
            message = f"Error retrieving post '{post_id}'. {e}"
            logger.error(message)
            raise GettingPostError(message) from e

        return map_post_to_domain(post) if post else None


class GetPostCommentUseCase:
    """Get a comment of a post, None when the post or the comment does not exist."""

    def __init__(self, post_repository: PostRepository):
        self._repository = post_repository

    def execute(self, post_id: str, comment_id: str) -> Optional[PostComment]:
        try:
            comment = self._repository.get_post_comment(post_id, comment_id)
        except Exception as e:
            message = f"Error retrieving post '{post_id}' comment '{comment_id}'. {e}"
            logger.error(message)
            raise GettingPostCommentError(message) from e

        return map_comment_to_domain(comment) if comment else None
