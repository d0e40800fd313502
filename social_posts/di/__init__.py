"""
Dependency Injection
====================

Container wiring MongoDB, repositories and application services.
"""
from .container import DIContainer, get_container, set_container

__all__ = ["DIContainer", "get_container", "set_container"]
