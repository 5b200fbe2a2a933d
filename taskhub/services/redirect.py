"""Short code resolution for redirects."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.config import Settings
from taskhub.repositories.base import RepositoryError
from taskhub.repositories.short_link_repository import ShortLinkRepository
from taskhub.services.exceptions import URLNotFoundError

logger = logging.getLogger(__name__)


class RedirectResolver:
    """
    Resolves short codes to the original URLs they redirect to.

    A failing lookup is reported exactly like an unknown code: callers only
    ever see ``URLNotFoundError``.
    """

    def __init__(self, url_repository: ShortLinkRepository, settings: Settings):
        self.url_repository = url_repository
        self.settings = settings

    def extract_code(self, path: str) -> str:
        """Strip the short link routing prefix from a path, if present."""
        prefix = self.settings.SHORT_LINK_PATH.lstrip("/") + "/"
        code = path.lstrip("/")
        if code.startswith(prefix):
            code = code[len(prefix):]
        return code

    async def resolve(self, db: AsyncSession, code: str) -> str:
        """
        Look up the original URL for a short code.

        Args:
            db: Database session
            code: The short code, optionally still carrying the routing prefix

        Returns:
            str: The stored original URL

        Raises:
            URLNotFoundError: If the code is unknown or the lookup failed
        """
        short_code = self.extract_code(code)
        if not short_code:
            raise URLNotFoundError("Shortened URL not found")

        try:
            original_url = await self.url_repository.find_original_url_by_code(db, short_code)
        except RepositoryError as e:
            logger.error(f"Error resolving short code '{short_code}': {e}")
            raise URLNotFoundError(f"Shortened URL '{short_code}' not found") from e

        if original_url is None:
            raise URLNotFoundError(f"Shortened URL '{short_code}' not found")
        return original_url
