"""
Post Errors
===========

Typed errors raised by the post application services.

Each one wraps a lower-level failure (an unexpected NULL result from the
data source, or an exception it raised) with the operation and identifiers
involved. The HTTP layer never shows these messages to clients.
"""

NULL_RESULT_SUFFIX = "initiated but completed with NULL result"


class PostError(Exception):
    """Base class for every post related failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __eq__(self, other):
        return type(self) is type(other) and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))


class CreatingPostError(PostError):
    """Raised when a post could not be persisted."""


class CreatingPostCommentError(PostError):
    """Raised when a comment could not be appended to a post."""


class GettingPostLikeError(PostError):
    """Raised when looking up a post like fails."""


class GettingPostError(PostError):
    """Raised when posts could not be retrieved."""


class GettingPostCommentError(PostError):
    """Raised when looking up a post comment fails."""


class LikingPostError(PostError):
    """Raised when a like could not be stored on a post."""


class DislikingPostError(PostError):
    """Raised when a like could not be removed from a post."""
