"""HTTP middleware for the taskhub application."""

from taskhub.middleware.logging import RequestLoggingMiddleware, add_logging_middleware

__all__ = ["RequestLoggingMiddleware", "add_logging_middleware"]
