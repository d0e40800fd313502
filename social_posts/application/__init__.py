"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain models and repositories.

Contains:
- Use Cases: Business operations (create post, comment, like, etc.)
- Services: Application services that coordinate multiple use cases
- Mappers: persistence records <-> domain models
- DTO: request/response models
"""
