"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
from dataclasses import replace
from typing import Optional
from pymongo.collection import Collection

from social_posts.core.config import get_settings
from social_posts.domain.constants.user_fields import UserFields
from social_posts.domain.models.user import User
from social_posts.domain.repositories.user_repository import UserRepository
from social_posts.infrastructure.db.mongo_connection import get_mongo_client
from social_posts.infrastructure.db.post_requests import to_object_id
from social_posts.domain.records import UserRecord
from social_posts.utils.datetime_utils import now


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository."""

    def __init__(self, collection: Optional[Collection] = None):
        if collection is None:
            collection = get_mongo_client().get_collection(get_settings().users_collection)
        self._collection = collection

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        record = UserRecord.from_document(doc)
        return User(
            id=str(record._id),
            username=record.username,
            email=record.email,
            name=record.name,
            surname=record.surname,
            avatar=record.avatar,
        )

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by its ID. Malformed ids are simply not found."""
        object_id = to_object_id(user_id)
        if object_id is None:
            return None
        doc = self._collection.find_one({UserFields.MONGO_ID: object_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def create(self, user: UserRecord) -> User:
        """Create a new user."""
        timestamp = now()
        user = replace(user, created_at=timestamp, updated_at=timestamp)
        self._collection.insert_one(user.to_document())
        return self._to_entity(user.to_document())
