"""
Post Mappers
============

Pure conversions between persistence records and domain models.

Reads: records -> domain (store ``_id`` becomes ``id``, owner sub-documents
are trimmed down to id/name/surname/avatar).
Writes: domain -> records (owner ``id`` becomes ``userId``).
"""
from social_posts.domain.models.post import Post, PostComment, PostLike, PostOwner
from social_posts.domain.records import (
    CommentRecord,
    LikeRecord,
    NewPostRecord,
    OwnerRecord,
    PostRecord,
)


def map_owner_to_domain(record: OwnerRecord) -> PostOwner:
    return PostOwner(
        id=record.user_id,
        name=record.name,
        surname=record.surname,
        avatar=record.avatar,
    )


def map_comment_to_domain(record: CommentRecord) -> PostComment:
    return PostComment(
        id=str(record._id),
        body=record.body,
        owner=map_owner_to_domain(record.owner),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def map_like_to_domain(record: LikeRecord) -> PostLike:
    return PostLike(
        id=str(record._id),
        name=record.name,
        surname=record.surname,
        avatar=record.avatar,
    )


def map_post_to_domain(record: PostRecord) -> Post:
    return Post(
        id=str(record._id),
        body=record.body,
        owner=map_owner_to_domain(record.owner),
        comments=[map_comment_to_domain(comment) for comment in record.comments],
        likes=[map_like_to_domain(like) for like in record.likes],
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def map_owner_to_record(owner: PostOwner) -> OwnerRecord:
    return OwnerRecord(
        user_id=owner.id,
        name=owner.name,
        surname=owner.surname,
        avatar=owner.avatar,
    )


def map_like_to_record(like: PostLike) -> LikeRecord:
    return LikeRecord(
        _id=like.id,
        name=like.name,
        surname=like.surname,
        avatar=like.avatar,
    )


def map_new_post_to_record(owner: PostOwner, body: str) -> NewPostRecord:
    """Creation input of a post: no comments and no likes yet."""
    return NewPostRecord(body=body, owner=map_owner_to_record(owner), comments=[], likes=[])
