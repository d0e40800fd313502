"""
Post DTO
========

Pydantic models for post API requests and responses.
JSON field names are camelCase.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer

from social_posts.domain.models.post import Post, PostComment, PostLike, PostOwner
from social_posts.utils.datetime_utils import to_iso


class PostCreateRequest(BaseModel):
    """DTO for creating a post."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"postBody": "Hello world!"}},
    )

    post_body: str = Field(..., alias="postBody", description="Post text")


class PostCommentRequest(BaseModel):
    """DTO for commenting a post."""
    model_config = ConfigDict(populate_by_name=True)

    post_id: str = Field(..., alias="postId")
    comment_body: str = Field(..., alias="commentBody")


class PostLikeRequest(BaseModel):
    """DTO for liking / disliking a post. The like owner is the caller."""
    model_config = ConfigDict(populate_by_name=True)

    post_id: str = Field(..., alias="postId")


class PostOwnerResponse(BaseModel):
    id: str
    name: str
    surname: str
    avatar: str

    @classmethod
    def from_domain(cls, owner: PostOwner) -> "PostOwnerResponse":
        return cls(id=owner.id, name=owner.name, surname=owner.surname, avatar=owner.avatar)


class PostLikeResponse(BaseModel):
    id: str
    name: str
    surname: str
    avatar: str

    @classmethod
    def from_domain(cls, like: PostLike) -> "PostLikeResponse":
        return cls(id=like.id, name=like.name, surname=like.surname, avatar=like.avatar)


class _TimestampedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> Optional[str]:
        return to_iso(value)


class PostCommentResponse(_TimestampedResponse):
    id: str
    body: str
    owner: PostOwnerResponse

    @classmethod
    def from_domain(cls, comment: PostComment) -> "PostCommentResponse":
        return cls(
            id=comment.id,
            body=comment.body,
            owner=PostOwnerResponse.from_domain(comment.owner),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class PostResponse(_TimestampedResponse):
    """DTO for post data."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "5edbc3e4ea9ff3e1ab4b2e6c",
                "body": "Hello world!",
                "owner": {
                    "id": "5edbc3e4ea9ff3e1ab4b2e6a",
                    "name": "Jane",
                    "surname": "Doe",
                    "avatar": "https://cdn.example.com/avatars/jane.png",
                },
                "comments": [],
                "likes": [],
                "createdAt": "2020-06-06T16:30:00.000Z",
                "updatedAt": "2020-06-06T16:30:00.000Z",
            }
        },
    )

    id: str
    body: str
    owner: PostOwnerResponse
    comments: List[PostCommentResponse]
    likes: List[PostLikeResponse]

    @classmethod
    def from_domain(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            body=post.body,
            owner=PostOwnerResponse.from_domain(post.owner),
            comments=[PostCommentResponse.from_domain(comment) for comment in post.comments],
            likes=[PostLikeResponse.from_domain(like) for like in post.likes],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
