"""
Post Model
==========

Domain models representing a post and the entities it owns.
These are pure domain objects with no infrastructure dependencies.
"""
from datetime import datetime
from typing import List
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PostOwner:
    """Snapshot of a user's public profile, taken when the post or comment is written."""
    id: str
    name: str
    surname: str
    avatar: str


@dataclass(frozen=True)
class PostLike:
    """
    A like on a post.

    The like is keyed by the liking user's id, so a post holds at most one
    like per user.
    """
    id: str
    name: str
    surname: str
    avatar: str


@dataclass(frozen=True)
class PostComment:
    """A comment appended to a post."""
    id: str
    body: str
    owner: PostOwner
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Post:
    """
    Post domain model.

    Comments and likes keep their insertion order.
    """
    id: str
    body: str
    owner: PostOwner
    created_at: datetime
    updated_at: datetime
    comments: List[PostComment] = field(default_factory=list)
    likes: List[PostLike] = field(default_factory=list)
