"""
Domain Errors
=============

Typed errors for post operations and request authentication.
"""
from .post_errors import (
    PostError,
    CreatingPostError,
    CreatingPostCommentError,
    GettingPostLikeError,
    GettingPostError,
    GettingPostCommentError,
    LikingPostError,
    DislikingPostError,
)
from .auth_errors import (
    AuthenticationError,
    TokenNotProvidedError,
    TokenExpiredError,
    InvalidTokenError,
    UserNotFoundError,
)

__all__ = [
    "PostError",
    "CreatingPostError",
    "CreatingPostCommentError",
    "GettingPostLikeError",
    "GettingPostError",
    "GettingPostCommentError",
    "LikingPostError",
    "DislikingPostError",
    "AuthenticationError",
    "TokenNotProvidedError",
    "TokenExpiredError",
    "InvalidTokenError",
    "UserNotFoundError",
]
