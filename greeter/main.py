"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from greeter.api.v1 import greeting_router, person_router
from greeter.core.config import get_settings


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title=settings.app_title,
        description="Keyword arguments and mass assignment over HTTP",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(greeting_router, prefix=f"{settings.api_v1_prefix}/greetings")
    application.include_router(person_router, prefix=f"{settings.api_v1_prefix}/people")

    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": settings.app_title,
            "version": settings.app_version,
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
