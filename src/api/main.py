"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance
and configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.adapters.repository.memory import InMemoryAccountRepository
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Sign-up API v1 - Create user accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Loads settings and creates the account repository on startup, so bad
    configuration fails before the first request. Logs shutdown.
    """
    logger.info("Starting application...")
    settings = get_settings()
    logger.info("bcrypt cost factor: %d", settings.bcrypt_cost)

    # Store repository in app state for dependency injection
    app.state.account_repository = InMemoryAccountRepository()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    logger.info("Stored %d account(s) during this run", len(app.state.account_repository))


app = FastAPI(
    title="signup-api",
    description="Sign-up API - Validates sign-up requests, hashes passwords and stores accounts",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Returns 200 OK if the application is up."""
    return {"status": "healthy"}
