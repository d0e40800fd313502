"""
Post Repository Interface
=========================

Abstract interface for post data access.
Implementations should be in the infrastructure layer.

The interface speaks persistence records: mapping them to domain models is
the job of the application services.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from social_posts.domain.records import (
    CommentRecord,
    LikeRecord,
    NewPostRecord,
    OwnerRecord,
    PostRecord,
)


class PostRepository(ABC):
    """
    Abstract repository for post persistence operations.

    Not-found outcomes are returned as None. Implementations never raise
    domain errors; store failures propagate as they are.
    """

    @abstractmethod
    def create_post(self, post: NewPostRecord) -> Optional[PostRecord]:
        """
        Persist a new post.

        Args:
            post: Body, owner and (usually empty) comments and likes

        Returns:
            The stored post record
        """
        pass

    @abstractmethod
    def get_posts(self) -> List[PostRecord]:
        """
        Get every persisted post.

        Returns:
            List of post records, in no particular order
        """
        pass

    @abstractmethod
    def get_post_by_id(self, post_id: str) -> Optional[PostRecord]:
        """
        Find a post by its ID.

        Args:
            post_id: Post identifier

        Returns:
            Post record if found, None otherwise
        """
        pass

    @abstractmethod
    def create_post_comment(self, post_id: str, body: str, owner: OwnerRecord) -> Optional[PostRecord]:
        """
        Append a comment to a post.

        Args:
            post_id: Post identifier
            body: Comment text
            owner: Owner snapshot of the comment author

        Returns:
            The updated post record, None if the post does not exist
        """
        pass

    @abstractmethod
    def get_post_comment(self, post_id: str, comment_id: str) -> Optional[CommentRecord]:
        """
        Find a comment of a post.

        Returns:
            Comment record, None if the post or the comment does not exist
        """
        pass

    @abstractmethod
    def get_post_like_by_owner_id(self, post_id: str, owner_id: str) -> Optional[LikeRecord]:
        """
        Find the like a user left on a post.

        Returns:
            Like record, None if the post does not exist or the user has not liked it
        """
        pass

    @abstractmethod
    def like_post(self, post_id: str, like: LikeRecord) -> Optional[PostRecord]:
        """
        Store a like on a post, replacing a previous like of the same owner.

        Returns:
            The updated post record, None if the post does not exist
        """
        pass

    @abstractmethod
    def dislike_post(self, post_id: str, owner_id: str) -> Optional[PostRecord]:
        """
        Remove the like of a user from a post.

        Returns:
            The updated post record, None if the post does not exist
        """
        pass
