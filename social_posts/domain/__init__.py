"""
Domain Layer
============

Core business models, errors and data access contracts.

Contains:
- Models: Post, PostOwner, PostComment, PostLike, User
- Errors: typed post and authentication errors
- Repository Interfaces: Abstract contracts for data access
"""
