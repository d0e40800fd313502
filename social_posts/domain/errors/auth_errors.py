"""
Authentication Errors
=====================

Each error knows the HTTP status and the plain-text body it maps to.
"""
from typing import Optional


class AuthenticationError(Exception):
    """Base class for request authentication failures."""

    status_code = 401
    message = "Unauthorized"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class TokenNotProvidedError(AuthenticationError):
    status_code = 403
    message = "Required token was not provided"


class TokenExpiredError(AuthenticationError):
    status_code = 401
    message = "Token expired"


class InvalidTokenError(AuthenticationError):
    status_code = 401
    message = "Invalid token"


class UserNotFoundError(AuthenticationError):
    status_code = 400
    message = "User does not exist"
