"""
MongoDB Client
==============

Singleton MongoDB client for database connections.
"""
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection

from social_posts.core.config import get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    MongoDB client manager.

    Manages the MongoDB connection and provides access to collections.
    A ready client (e.g. an in-memory one) can be handed in instead of
    connecting to MONGO_URI.
    """

    def __init__(self, client: Optional[MongoClient] = None, database_name: Optional[str] = None):
        self._client: Optional[MongoClient] = client
        self._database: Optional[Database] = None
        self._database_name = database_name or get_settings().mongo_database_name

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is None:
            settings = get_settings()
            if not settings.mongo_uri:
                raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
            self._client = MongoClient(settings.mongo_uri)

        self._database = self._client[self._database_name]
        logger.info(f"Connected to MongoDB: {self._database_name}")

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        database = self.get_database()
        return database[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")


# Global client manager (singleton pattern)
_mongo_client: Optional[MongoClientManager] = None


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = MongoClientManager()
    return _mongo_client
