from typing import TYPE_CHECKING, Optional
from ...infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer", mongo_client: Optional[MongoClientManager] = None) -> None:
        """
        Register the MongoDB client manager in the container.
        Falls back to the process-wide client when none is given.
        """
        container.register_singleton("mongo_client", mongo_client or get_mongo_client())
