"""
Dependency Container
====================

FastAPI dependencies resolving services from the DI container.
"""
from typing import Optional

from fastapi import Depends, Header

from social_posts.application.services.auth_service import AuthService
from social_posts.application.services.post_service import PostService
from social_posts.di.container import get_container
from social_posts.domain.models.user import User


def get_post_service() -> PostService:
    """
    Get post service instance (singleton).

    Returns:
        PostService instance
    """
    return get_container().get(PostService)


def get_auth_service() -> AuthService:
    """
    Get auth service instance (singleton).

    Returns:
        AuthService instance
    """
    return get_container().get(AuthService)


def get_current_user(
    authorization: Optional[str] = Header(None),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Authenticate the caller from the ``Authorization: bearer <token>`` header.

    Authentication errors are turned into responses by the handlers in
    social_posts.api.v1.error_handlers.
    """
    return auth_service.authenticate(authorization)
