"""API package for the taskhub application.

This package contains the API layer components including routes,
response schemas, and dependency providers.
"""

from taskhub.api.routes import build_api_router

__all__ = ["build_api_router"]
