from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_post_repository import MongoPostRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets database client from database provider and creates repository instances.
        """
        settings = get_settings()
        mongo_client = container.get("mongo_client")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            PostRepository,
            MongoPostRepository(mongo_client.get_collection(settings.posts_collection))
        )

        container.register_singleton(
            UserRepository,
            MongoUserRepository(mongo_client.get_collection(settings.users_collection))
        )
