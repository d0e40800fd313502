"""
Error Handlers
==============

Maps domain and HTTP errors to plain-text responses.

Post errors always become a generic 500: their messages carry internal
detail and are only logged.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from social_posts.domain.errors import AuthenticationError, PostError

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_MESSAGE = "Internal Server Error"


async def handle_authentication_error(request: Request, exc: AuthenticationError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def handle_post_error(request: Request, exc: PostError) -> PlainTextResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return PlainTextResponse(
        INTERNAL_SERVER_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(application: FastAPI) -> None:
    """Install the exception handlers on the application."""
    application.add_exception_handler(AuthenticationError, handle_authentication_error)
    application.add_exception_handler(PostError, handle_post_error)
    application.add_exception_handler(StarletteHTTPException, handle_http_exception)
