from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...application.services.post_service import PostService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post service provider - registers post-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register post service.
        Service is created with repository from container.
        """
        container.register_singleton(
            PostService,
            PostService(
                post_repository=container.get(PostRepository)
            )
        )
