"""
Post Requests
=============

MongoDB requests over the posts collection.

Every request returns persistence records, or None when the post (or the
nested comment/like) does not exist. Malformed identifiers count as "does
not exist". Store failures (pymongo.errors.PyMongoError) propagate.
"""
from dataclasses import replace
from typing import Any, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection

from social_posts.domain.constants.post_fields import PostFields, CommentFields, LikeFields
from social_posts.domain.records import (
    CommentRecord,
    LikeRecord,
    NewPostRecord,
    OwnerRecord,
    PostRecord,
)
from social_posts.utils.datetime_utils import next_timestamp, now


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a string id to ObjectId. Returns None for malformed ids."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def _to_record(doc: Optional[dict]) -> Optional[PostRecord]:
    return PostRecord.from_document(doc) if doc else None


def create(collection: Collection, post: NewPostRecord) -> Optional[PostRecord]:
    """Persist a new post and return it as stored."""
    timestamp = now()
    owner = replace(post.owner, created_at=timestamp, updated_at=timestamp)

    doc = {
        PostFields.BODY: post.body,
        PostFields.OWNER: owner.to_document(),
        PostFields.COMMENTS: [comment.to_document() for comment in post.comments],
        PostFields.LIKES: [like.to_document() for like in post.likes],
        PostFields.CREATED_AT: timestamp,
        PostFields.UPDATED_AT: timestamp,
    }
    result = collection.insert_one(doc)

    return _to_record(collection.find_one({PostFields.MONGO_ID: result.inserted_id}))


def get_all(collection: Collection) -> List[PostRecord]:
    """Return every persisted post. No filtering, paging or ordering."""
    return [PostRecord.from_document(doc) for doc in collection.find()]


def get_by_id(collection: Collection, post_id: str) -> Optional[PostRecord]:
    object_id = to_object_id(post_id)
    if object_id is None:
        return None
    return _to_record(collection.find_one({PostFields.MONGO_ID: object_id}))


def get_comment(collection: Collection, post_id: str, comment_id: str) -> Optional[CommentRecord]:
    """Return the comment of the post, or None if either one is missing."""
    post_object_id = to_object_id(post_id)
    comment_object_id = to_object_id(comment_id)
    if post_object_id is None or comment_object_id is None:
        return None

    doc = collection.find_one({
        PostFields.MONGO_ID: post_object_id,
        f"{PostFields.COMMENTS}.{CommentFields.MONGO_ID}": comment_object_id,
    })
    if not doc:
        return None

    return next(
        (
            CommentRecord.from_document(comment)
            for comment in doc.get(PostFields.COMMENTS, [])
            if comment.get(CommentFields.MONGO_ID) == comment_object_id
        ),
        None,
    )


def create_comment(
    collection: Collection,
    post_id: str,
    body: str,
    owner: OwnerRecord,
) -> Optional[PostRecord]:
    """Append a comment to the post and return the updated post."""
    object_id = to_object_id(post_id)
    if object_id is None:
        return None

    current = collection.find_one({PostFields.MONGO_ID: object_id}, {PostFields.UPDATED_AT: 1})
    if current is None:
        return None

    timestamp = next_timestamp(current.get(PostFields.UPDATED_AT))
    comment = CommentRecord(body=body, owner=owner, created_at=timestamp, updated_at=timestamp)

    doc = collection.find_one_and_update(
        {PostFields.MONGO_ID: object_id},
        {
            "$push": {PostFields.COMMENTS: comment.to_document()},
            "$set": {PostFields.UPDATED_AT: timestamp},
        },
        return_document=ReturnDocument.AFTER,
    )
    return _to_record(doc)


def get_like(collection: Collection, post_id: str, owner_id: str) -> Optional[LikeRecord]:
    """Return the like the user left on the post, or None."""
    object_id = to_object_id(post_id)
    if object_id is None:
        return None

    doc = collection.find_one({
        PostFields.MONGO_ID: object_id,
        f"{PostFields.LIKES}.{LikeFields.MONGO_ID}": owner_id,
    })
    if not doc:
        return None

    return next(
        (
            LikeRecord.from_document(like)
            for like in doc.get(PostFields.LIKES, [])
            if like.get(LikeFields.MONGO_ID) == owner_id
        ),
        None,
    )


def add_like(collection: Collection, post_id: str, like: LikeRecord) -> Optional[PostRecord]:
    """
    Store a like on the post, keyed by its owner.

    A second like from the same owner replaces the first one at its index,
    so the likes array never holds two entries for one user. If the array
    was reordered by a concurrent write in between, nothing is written and
    None is returned.
    """
    object_id = to_object_id(post_id)
    if object_id is None:
        return None

    current = collection.find_one(
        {PostFields.MONGO_ID: object_id},
        {PostFields.LIKES: 1, PostFields.UPDATED_AT: 1},
    )
    if current is None:
        return None

    timestamp = next_timestamp(current.get(PostFields.UPDATED_AT))
    like_ids = [stored.get(LikeFields.MONGO_ID) for stored in current.get(PostFields.LIKES) or []]

    if like._id in like_ids:
        slot = f"{PostFields.LIKES}.{like_ids.index(like._id)}"
        doc = collection.find_one_and_update(
            {PostFields.MONGO_ID: object_id, f"{slot}.{LikeFields.MONGO_ID}": like._id},
            {"$set": {slot: like.to_document(), PostFields.UPDATED_AT: timestamp}},
            return_document=ReturnDocument.AFTER,
        )
    else:
        doc = collection.find_one_and_update(
            {
                PostFields.MONGO_ID: object_id,
                f"{PostFields.LIKES}.{LikeFields.MONGO_ID}": {"$ne": like._id},
            },
            {
                "$push": {PostFields.LIKES: like.to_document()},
                "$set": {PostFields.UPDATED_AT: timestamp},
            },
            return_document=ReturnDocument.AFTER,
        )
    return _to_record(doc)


def remove_like(collection: Collection, post_id: str, owner_id: str) -> Optional[PostRecord]:
    """Remove the user's like from the post. A post without that like is returned unchanged."""
    object_id = to_object_id(post_id)
    if object_id is None:
        return None

    current = collection.find_one({PostFields.MONGO_ID: object_id})
    if current is None:
        return None

    liked = any(
        stored.get(LikeFields.MONGO_ID) == owner_id
        for stored in current.get(PostFields.LIKES) or []
    )
    if not liked:
        return _to_record(current)

    doc = collection.find_one_and_update(
        {PostFields.MONGO_ID: object_id, f"{PostFields.LIKES}.{LikeFields.MONGO_ID}": owner_id},
        {
            "$pull": {PostFields.LIKES: {LikeFields.MONGO_ID: owner_id}},
            "$set": {PostFields.UPDATED_AT: next_timestamp(current.get(PostFields.UPDATED_AT))},
        },
        return_document=ReturnDocument.AFTER,
    )
    if doc is None:
        doc = collection.find_one({PostFields.MONGO_ID: object_id})
    return _to_record(doc)
