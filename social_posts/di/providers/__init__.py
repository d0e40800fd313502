"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .post_provider import PostProvider
from .auth_provider import AuthProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "PostProvider",
    "AuthProvider",
]
