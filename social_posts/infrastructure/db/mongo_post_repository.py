"""
MongoDB Post Repository
=======================

Concrete implementation of PostRepository using MongoDB.
"""
from typing import List, Optional
from pymongo.collection import Collection

from social_posts.core.config import get_settings
from social_posts.domain.repositories.post_repository import PostRepository
from social_posts.infrastructure.db import post_requests
from social_posts.infrastructure.db.mongo_connection import get_mongo_client
from social_posts.domain.records import (
    CommentRecord,
    LikeRecord,
    NewPostRecord,
    OwnerRecord,
    PostRecord,
)


class MongoPostRepository(PostRepository):
    """
    MongoDB implementation of PostRepository.

    Handles all post persistence operations using MongoDB.
    """

    def __init__(self, collection: Optional[Collection] = None):
        """Initialize repository with the posts collection (defaults to the configured one)."""
        if collection is None:
            collection = get_mongo_client().get_collection(get_settings().posts_collection)
        self._collection = collection

    def create_post(self, post: NewPostRecord) -> Optional[PostRecord]:
        return post_requests.create(self._collection, post)

    def get_posts(self) -> List[PostRecord]:
        return post_requests.get_all(self._collection)

    def get_post_by_id(self, post_id: str) -> Optional[PostRecord]:
        return post_requests.get_by_id(self._collection, post_id)

    def create_post_comment(self, post_id: str, body: str, owner: OwnerRecord) -> Optional[PostRecord]:
        return post_requests.create_comment(self._collection, post_id, body, owner)

    def get_post_comment(self, post_id: str, comment_id: str) -> Optional[CommentRecord]:
        return post_requests.get_comment(self._collection, post_id, comment_id)

    def get_post_like_by_owner_id(self, post_id: str, owner_id: str) -> Optional[LikeRecord]:
        return post_requests.get_like(self._collection, post_id, owner_id)

    def like_post(self, post_id: str, like: LikeRecord) -> Optional[PostRecord]:
        return post_requests.add_like(self._collection, post_id, like)

    def dislike_post(self, post_id: str, owner_id: str) -> Optional[PostRecord]:
        return post_requests.remove_like(self._collection, post_id, owner_id)
