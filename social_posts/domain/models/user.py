"""
User Model
==========

Domain model representing a registered user.
"""
from dataclasses import dataclass

from social_posts.domain.models.post import PostLike, PostOwner


@dataclass(frozen=True)
class User:
    """User domain model. Credentials never leave the persistence layer."""
    id: str
    username: str
    email: str
    name: str
    surname: str
    avatar: str

    def to_post_owner(self) -> PostOwner:
        """Snapshot this user as the owner of a post or comment."""
        return PostOwner(id=self.id, name=self.name, surname=self.surname, avatar=self.avatar)

    def to_post_like(self) -> PostLike:
        """Snapshot this user as a like on a post."""
        return PostLike(id=self.id, name=self.name, surname=self.surname, avatar=self.avatar)
