from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.services.auth_service import AuthService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Auth service provider - registers request authentication"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            AuthService,
            AuthService(
                user_repository=container.get(UserRepository)
            )
        )
