"""
Create Post Comment Use Case
============================

Business use case for appending a comment to a post.
"""
import logging

from social_posts.application.mappers.post_mapper import map_owner_to_record, map_post_to_domain
from social_posts.domain.errors import CreatingPostCommentError
from social_posts.domain.errors.post_errors import NULL_RESULT_SUFFIX
from social_posts.domain.models.post import Post, PostOwner
from social_posts.domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class CreatePostCommentUseCase:
    """Use case for commenting a post."""

    def __init__(self, post_repository: PostRepository):
        self._repository = post_repository

    def execute(self, post_id: str, comment_body: str, comment_owner: PostOwner) -> Post:
        """
        Append a comment and return the updated post.

        Raises:
            CreatingPostCommentError: If the post is missing or the comment could not be stored
        """
        # "commment" is part of the published message text
        error_prefix = f"Error creating post '{post_id}' commment by user '{comment_owner.id}'."

        try:
            updated_post = self._repository.create_post_comment(
                post_id, comment_body, map_owner_to_record(comment_owner)
            )
        except Exception as e:
            logger.error(f"{error_prefix} {e}")
            raise CreatingPostCommentError(f"{error_prefix} {e}") from e

        if updated_post is None:
            message = f"{error_prefix} Post comment insertion process {NULL_RESULT_SUFFIX}"
            logger.error(message)
            raise CreatingPostCommentError(message)

        logger.info(f"User {comment_owner.id} commented post {post_id}")
        return map_post_to_domain(updated_post)
