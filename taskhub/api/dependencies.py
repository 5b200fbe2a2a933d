"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access settings, repositories and service instances.
"""

from fastapi import Depends, Request

from taskhub.core.config import Settings
from taskhub.repositories.short_link_repository import ShortLinkRepository
from taskhub.repositories.record_repositories import (
    TaskContributorRepository,
    TaskRepository,
    UserRepository,
)
from taskhub.services.redirect import RedirectResolver
from taskhub.services.records import TaskService, UserService
from taskhub.services.shortener import ShortenerService


def get_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


async def get_short_link_repository():
    """Get an instance of the short link repository."""
    return ShortLinkRepository()


async def get_shortener_service(
    url_repo: ShortLinkRepository = Depends(get_short_link_repository),
    settings: Settings = Depends(get_settings),
) -> ShortenerService:
    """Get an instance of the URL shortening service."""
    return ShortenerService(url_repository=url_repo, settings=settings)


async def get_redirect_resolver(
    url_repo: ShortLinkRepository = Depends(get_short_link_repository),
    settings: Settings = Depends(get_settings),
) -> RedirectResolver:
    """Get an instance of the redirect resolver."""
    return RedirectResolver(url_repository=url_repo, settings=settings)


async def get_user_service() -> UserService:
    return UserService(user_repository=UserRepository())


async def get_task_service() -> TaskService:
    return TaskService(
        task_repository=TaskRepository(),
        contributor_repository=TaskContributorRepository(),
    )
