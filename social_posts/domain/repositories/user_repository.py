"""
User Repository Interface
=========================

Abstract interface for user data access.
"""
from abc import ABC, abstractmethod
from typing import Optional

from social_posts.domain.models.user import User
from social_posts.domain.records import UserRecord


class UserRepository(ABC):
    """Abstract repository for user lookups."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by its ID.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def create(self, user: UserRecord) -> User:
        """
        Persist a new user.

        Args:
            user: User record to store

        Returns:
            Created user entity
        """
        pass
