"""Decorators for the taskhub application.

This module contains reusable decorators for common functionality
across the application.
"""

import functools

from fastapi import Request

from taskhub.core.url_logger import log_url_access


def log_url_access_decorator():
    """Short link access logging decorator that preserves route function signature.

    The wrapped route must accept ``request`` and ``short_code`` keyword
    arguments; FastAPI always passes route parameters by keyword.

    Returns:
        callable: Decorator function
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            request: Request = kwargs["request"]
            settings = request.app.state.settings
            if settings.URL_ACCESS_LOGGING_ENABLED:
                log_url_access(
                    short_code=kwargs.get("short_code", ""),
                    ip_address=request.client.host if request.client else "unknown",
                    user_agent=request.headers.get("user-agent", "")
                )
            return await func(*args, **kwargs)
        return wrapper
    return decorator
