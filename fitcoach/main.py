"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI

from fitcoach.api.v1.router import api_router
from fitcoach.core.config import settings
from fitcoach.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Daily readiness, weekly volume landmarks and session impact estimates.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")

    application.include_router(api_router, prefix="/api/v1")

    @application.get("/")
    async def root():
        return {
            "message": "Fitcoach API",
            "version": settings.VERSION,
            "status": "healthy"
        }

    @application.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "fitcoach-api",
            "version": settings.VERSION
        }

    @application.get("/info")
    async def info():
        return {
            "project name": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "authors": settings.AUTHORS,
            "project url": settings.PROJECT_URL
        }

    logger.info("Fitcoach API %s configured", settings.VERSION)
    return application


app = create_app()
