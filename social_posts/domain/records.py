"""
Persistence Records
===================

Store-native shapes of posts, comments, likes and users.

These mirror the MongoDB documents one to one (``_id`` identifiers, the full
owner sub-document with its own audit timestamps). They never leave the data
source / application boundary: services map them to domain models.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from bson import ObjectId

from social_posts.domain.constants.post_fields import (
    PostFields,
    OwnerFields,
    CommentFields,
    LikeFields,
)
from social_posts.domain.constants.user_fields import UserFields


@dataclass
class OwnerRecord:
    """Owner sub-document. Post owners carry timestamps, comment owners do not."""
    user_id: str
    name: str
    surname: str
    avatar: str
    _id: ObjectId = field(default_factory=ObjectId)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "OwnerRecord":
        return cls(
            _id=doc.get(OwnerFields.MONGO_ID),
            user_id=doc.get(OwnerFields.USER_ID),
            name=doc.get(OwnerFields.NAME),
            surname=doc.get(OwnerFields.SURNAME),
            avatar=doc.get(OwnerFields.AVATAR),
            created_at=doc.get(OwnerFields.CREATED_AT),
            updated_at=doc.get(OwnerFields.UPDATED_AT),
        )

    def to_document(self) -> Dict[str, Any]:
        doc = {
            OwnerFields.MONGO_ID: self._id,
            OwnerFields.USER_ID: self.user_id,
            OwnerFields.NAME: self.name,
            OwnerFields.SURNAME: self.surname,
            OwnerFields.AVATAR: self.avatar,
        }
        if self.created_at is not None:
            doc[OwnerFields.CREATED_AT] = self.created_at
        if self.updated_at is not None:
            doc[OwnerFields.UPDATED_AT] = self.updated_at
        return doc


@dataclass
class CommentRecord:
    body: str
    owner: OwnerRecord
    created_at: datetime
    updated_at: datetime
    _id: ObjectId = field(default_factory=ObjectId)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "CommentRecord":
        return cls(
            _id=doc.get(CommentFields.MONGO_ID),
            body=doc.get(CommentFields.BODY),
            owner=OwnerRecord.from_document(doc.get(CommentFields.OWNER) or {}),
            created_at=doc.get(CommentFields.CREATED_AT),
            updated_at=doc.get(CommentFields.UPDATED_AT),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            CommentFields.MONGO_ID: self._id,
            CommentFields.BODY: self.body,
            CommentFields.OWNER: self.owner.to_document(),
            CommentFields.CREATED_AT: self.created_at,
            CommentFields.UPDATED_AT: self.updated_at,
        }


@dataclass
class LikeRecord:
    """Like sub-document, keyed by the liking user's id."""
    _id: str
    name: str
    surname: str
    avatar: str

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "LikeRecord":
        return cls(
            _id=doc.get(LikeFields.MONGO_ID),
            name=doc.get(LikeFields.NAME),
            surname=doc.get(LikeFields.SURNAME),
            avatar=doc.get(LikeFields.AVATAR),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            LikeFields.MONGO_ID: self._id,
            LikeFields.NAME: self.name,
            LikeFields.SURNAME: self.surname,
            LikeFields.AVATAR: self.avatar,
        }


@dataclass
class NewPostRecord:
    """Input of the post creation request: everything but identifiers and timestamps."""
    body: str
    owner: OwnerRecord
    comments: List[CommentRecord] = field(default_factory=list)
    likes: List[LikeRecord] = field(default_factory=list)


@dataclass
class PostRecord:
    _id: ObjectId
    body: str
    owner: OwnerRecord
    comments: List[CommentRecord]
    likes: List[LikeRecord]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "PostRecord":
        return cls(
            _id=doc.get(PostFields.MONGO_ID),
            body=doc.get(PostFields.BODY),
            owner=OwnerRecord.from_document(doc.get(PostFields.OWNER) or {}),
            comments=[CommentRecord.from_document(c) for c in doc.get(PostFields.COMMENTS) or []],
            likes=[LikeRecord.from_document(like) for like in doc.get(PostFields.LIKES) or []],
            created_at=doc.get(PostFields.CREATED_AT),
            updated_at=doc.get(PostFields.UPDATED_AT),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            PostFields.MONGO_ID: self._id,
            PostFields.BODY: self.body,
            PostFields.OWNER: self.owner.to_document(),
            PostFields.COMMENTS: [comment.to_document() for comment in self.comments],
            PostFields.LIKES: [like.to_document() for like in self.likes],
            PostFields.CREATED_AT: self.created_at,
            PostFields.UPDATED_AT: self.updated_at,
        }


@dataclass
class UserRecord:
    username: str
    email: str
    password: str
    name: str
    surname: str
    avatar: str
    _id: ObjectId = field(default_factory=ObjectId)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "UserRecord":
        return cls(
            _id=doc.get(UserFields.MONGO_ID),
            username=doc.get(UserFields.USERNAME),
            email=doc.get(UserFields.EMAIL),
            password=doc.get(UserFields.PASSWORD),
            name=doc.get(UserFields.NAME),
            surname=doc.get(UserFields.SURNAME),
            avatar=doc.get(UserFields.AVATAR),
            created_at=doc.get(UserFields.CREATED_AT),
            updated_at=doc.get(UserFields.UPDATED_AT),
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            UserFields.MONGO_ID: self._id,
            UserFields.USERNAME: self.username,
            UserFields.EMAIL: self.email,
            UserFields.PASSWORD: self.password,
            UserFields.NAME: self.name,
            UserFields.SURNAME: self.surname,
            UserFields.AVATAR: self.avatar,
            UserFields.CREATED_AT: self.created_at,
            UserFields.UPDATED_AT: self.updated_at,
        }
