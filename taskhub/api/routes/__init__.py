"""Routes package initialization.

This module assembles the route collection for the application.
"""

from fastapi import APIRouter

from taskhub.api.routes import health, records, redirect, shortener
from taskhub.core.config import Settings


def build_api_router(settings: Settings) -> APIRouter:
    """Create the root router with every route mounted at its configured path."""
    api_router = APIRouter()

    # Submission, short link listing and record endpoints at the root path
    api_router.include_router(shortener.router)
    api_router.include_router(records.router)

    # Health checks under the API prefix
    api_router.include_router(health.router, prefix=settings.API_PREFIX)

    # Short codes are served under the short link path, e.g. /s/{short_code}
    api_router.include_router(redirect.router, prefix=settings.SHORT_LINK_PATH)

    return api_router


__all__ = ["build_api_router"]
