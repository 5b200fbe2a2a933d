"""Repositories package for the taskhub application.

This package contains repository classes that handle database operations
following the Repository pattern.
"""

from taskhub.repositories.base import (
    BaseRepository,
    RepositoryError,
    DuplicateEntityError,
)
from taskhub.repositories.short_link_repository import ShortLinkRepository
from taskhub.repositories.record_repositories import (
    UserRepository,
    TaskRepository,
    TaskContributorRepository,
)

__all__ = [
    "BaseRepository",
    "RepositoryError",
    "DuplicateEntityError",
    "ShortLinkRepository",
    "UserRepository",
    "TaskRepository",
    "TaskContributorRepository",
]
