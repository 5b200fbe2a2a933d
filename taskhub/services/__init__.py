"""Service layer for the taskhub application.

This package contains service classes implementing the business logic of the application.
Services orchestrate interactions between repositories and provide domain-specific operations.
"""

from taskhub.services.code_generator import ALPHABET, generate_short_code
from taskhub.services.uniqueness import UniquenessChecker
from taskhub.services.shortener import ShortenerService
from taskhub.services.redirect import RedirectResolver
from taskhub.services.records import UserService, TaskService

__all__ = [
    "ALPHABET",
    "generate_short_code",
    "UniquenessChecker",
    "ShortenerService",
    "RedirectResolver",
    "UserService",
    "TaskService",
]
