"""
Create Post Use Case
====================

Business use case for publishing a new post.
"""
import logging

from social_posts.application.mappers.post_mapper import map_new_post_to_record, map_post_to_domain
from social_posts.domain.errors import CreatingPostError
from social_posts.domain.errors.post_errors import NULL_RESULT_SUFFIX
from social_posts.domain.models.post import Post, PostOwner
from social_posts.domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """
    Use case for creating a post.

    Any data source failure, including an unexpected NULL result, surfaces
    as CreatingPostError.
    """

    def __init__(self, post_repository: PostRepository):
        """
        Initialize use case with repository.

        Args:
            post_repository: Repository for post persistence
        """
        self._repository = post_repository

    def execute(self, owner: PostOwner, body: str) -> Post:
        """
        Execute the create post use case.

        Args:
            owner: Owner snapshot of the author
            body: Post text

        Returns:
            Created post

        Raises:
            CreatingPostError: If the post could not be persisted
        """
        error_prefix = f"Error creating post for user '{owner.id}'."

        try:
            created_post = self._repository.create_post(map_new_post_to_record(owner, body))
        except Exception as e:
            logger.error(f"{error_prefix} {e}")
            raise CreatingPostError(f"{error_prefix} {e}") from e

        if created_post is None:
            message = f"{error_prefix} Post creation process {NULL_RESULT_SUFFIX}"
            logger.error(message)
            raise CreatingPostError(message)

        logger.info(f"Post {created_post._id} created by user {owner.id}")
        return map_post_to_domain(created_post)
