"""
FastAPI Application
===================

Main FastAPI app setup with all routes, error handlers and middleware.
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from social_posts.api.v1 import post_router, register_error_handlers
from social_posts.core.config import get_settings
from social_posts.di.container import DIContainer, set_container

logger = logging.getLogger(__name__)


def create_application(container: Optional[DIContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging (settings come from the environment and .env)
    - CORS middleware configuration
    - Error handlers (domain errors -> plain-text responses)
    - API route registration
    - Shutdown handler closing the MongoDB connection

    Args:
        container: Pre-built DI container; the default one is created lazily

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    if container is not None:
        set_container(container)

    application = FastAPI(
        title="Social Posts API",
        description="Posts, comments and likes of the social network",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    application.include_router(post_router, prefix="/posts")

    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": "Social Posts API",
            "version": "1.0.0",
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @application.on_event("shutdown")
    async def shutdown_event():
        """Close the MongoDB connection when FastAPI shuts down."""
        from social_posts.di.container import get_container

        get_container().get("mongo_client").close()
        logger.info("Social Posts API stopped")

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("social_posts.main:app", host="0.0.0.0", port=8000)
