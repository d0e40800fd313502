"""
Auth Service
============

Resolves the caller of a request from its bearer token.
"""
import logging
from typing import Optional

import jwt

from social_posts.core.security import decode_access_token
from social_posts.domain.errors import (
    InvalidTokenError,
    TokenExpiredError,
    TokenNotProvidedError,
    UserNotFoundError,
)
from social_posts.domain.models.user import User
from social_posts.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


class AuthService:
    """
    Classifies an ``Authorization`` header into one of: missing token,
    expired token, invalid token, unknown user, or an authenticated user.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    @staticmethod
    def extract_token(authorization: Optional[str]) -> str:
        """
        Get the token out of ``bearer <token>``.

        Raises:
            TokenNotProvidedError: Empty header or no token after the scheme
        """
        parts = (authorization or "").split()
        if not parts:
            raise TokenNotProvidedError()

        if parts[0].lower() == BEARER_SCHEME:
            parts = parts[1:]
        if len(parts) != 1:
            raise TokenNotProvidedError()

        return parts[0]

    def authenticate(self, authorization: Optional[str]) -> User:
        """
        Authenticate the request caller.

        Args:
            authorization: Raw value of the Authorization header

        Returns:
            The user the token was issued to

        Raises:
            TokenNotProvidedError, TokenExpiredError, InvalidTokenError, UserNotFoundError
        """
        token = self.extract_token(authorization)

        try:
            payload = decode_access_token(token)
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected request with expired token")
            raise TokenExpiredError()
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected request with invalid token: {e}")
            raise InvalidTokenError()

        user_id = payload.get("sub")
        if not user_id:
            logger.warning("Token payload missing 'sub' field")
            raise InvalidTokenError()

        user = self._user_repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"Token issued to unknown user {user_id}")
            raise UserNotFoundError()

        return user
