"""
API v1 Package
===============

Version 1 API controllers.
"""
from .post_controller import router as post_router
from .error_handlers import register_error_handlers

__all__ = ["post_router", "register_error_handlers"]
