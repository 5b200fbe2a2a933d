"""URL shortening service for the taskhub application.

This module contains the ShortenerService class which implements the business
logic for minting short codes and persisting short links.
"""

import logging
from datetime import datetime
from typing import List, Optional
from urllib.parse import urlsplit

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.config import Settings
from taskhub.db.session import db_transaction
from taskhub.models.short_link import ShortLink
from taskhub.repositories.base import DuplicateEntityError, RepositoryError
from taskhub.repositories.short_link_repository import ShortLinkRepository
from taskhub.services.code_generator import CodeGenerator, generate_short_code
from taskhub.services.exceptions import (
    InvalidURLError,
    RecordRetrievalError,
    ShortCodeGenerationError,
    URLCreationError,
)
from taskhub.services.uniqueness import UniquenessChecker

logger = logging.getLogger(__name__)

ALLOWED_URL_PREFIXES = ("http://", "https://")


class ShortenerService:
    """
    Service for URL shortening business logic.

    This service validates submitted URLs, runs the bounded generate, check
    and insert loop that mints a unique short code, and composes the public
    short URL.
    """

    def __init__(
        self,
        url_repository: ShortLinkRepository,
        settings: Settings,
        checker: Optional[UniquenessChecker] = None,
        code_generator: Optional[CodeGenerator] = None,
    ):
        """
        Initialize the URL shortening service.

        Args:
            url_repository: Repository for short link data access
            settings: Application settings
            checker: Uniqueness checker; built from the repository when omitted
            code_generator: Callable producing a random code of a given length
        """
        self.url_repository = url_repository
        self.settings = settings
        self.checker = checker or UniquenessChecker(
            url_repository, fail_open=settings.URL_CODE_CHECK_FAIL_OPEN
        )
        self.code_generator = code_generator or self._default_generator

    def _default_generator(self, length: int) -> str:
        return generate_short_code(length, self.settings.URL_CODE_CHARS)

    def validate_url(self, original_url: str) -> str:
        """
        Check that a submitted URL is an absolute http or https URL.

        Returns:
            str: The URL, unchanged

        Raises:
            InvalidURLError: If the URL is malformed or uses another scheme
        """
        if not self._is_valid_url(original_url):
            raise InvalidURLError(f"Invalid URL format: {original_url!r}")
        return original_url

    async def submit(
        self,
        db: AsyncSession,
        original_url: str,
        creator_id: Optional[int] = None,
    ) -> str:
        """
        Shorten a URL and return the full short URL.

        Raises:
            InvalidURLError: If the URL is invalid; nothing is persisted
            ShortCodeGenerationError: If no free code was found
            URLCreationError: If persistence fails
        """
        self.validate_url(original_url)
        link = await self.create_short_link(db, original_url, creator_id=creator_id)
        logger.info(f"Created short link '{link.short_code}' (id={link.id})")
        return self.build_short_url(link.short_code)

    @db_transaction(db_param_name="db")
    async def create_short_link(
        self,
        db: AsyncSession,
        original_url: str,
        creator_id: Optional[int] = None,
    ) -> ShortLink:
        """
        Mint a unique short code and store the mapping.

        Each attempt generates one code, asks the uniqueness checker, and
        inserts if the code looks free. An insert rejected by the store's
        unique constraint counts as a collision. The code length grows by one
        after every ``URL_CODE_ATTEMPTS_PER_LENGTH`` attempts, up to
        ``URL_CODE_MAX_LENGTH_INCREASE`` extra characters.

        Args:
            db: Database session
            original_url: Already validated URL to shorten
            creator_id: Optional id of the creating user

        Returns:
            ShortLink: The stored short link

        Raises:
            ShortCodeGenerationError: If every attempt collided
            URLCreationError: If the store fails for any other reason
        """
        attempts = 0
        for length in self._code_lengths():
            for _ in range(self.settings.URL_CODE_ATTEMPTS_PER_LENGTH):
                attempts += 1
                candidate = self.code_generator(length)

                try:
                    if await self.checker.is_taken(db, candidate):
                        logger.debug(f"Short code '{candidate}' already taken")
                        continue
                except RepositoryError as e:
                    logger.error(f"Error checking short code uniqueness: {e}")
                    raise URLCreationError(f"Failed to check short code availability: {e}") from e

                try:
                    return await self.url_repository.insert_short_link(
                        db,
                        original_url=original_url,
                        short_code=candidate,
                        created_at=datetime.utcnow(),
                        creator_id=creator_id,
                    )
                except DuplicateEntityError:
                    logger.warning(f"Short code '{candidate}' was taken concurrently, retrying")
                    continue
                except RepositoryError as e:
                    logger.error(f"Error creating short link: {e}")
                    raise URLCreationError(f"Failed to create short link: {e}") from e

        raise ShortCodeGenerationError(
            f"Failed to generate a unique short code after {attempts} attempts"
        )

    def build_short_url(self, short_code: str) -> str:
        """Compose the public URL for a short code."""
        base_url = self.settings.BASE_URL.rstrip("/")
        return f"{base_url}{self.settings.SHORT_LINK_PATH}/{short_code}"

    async def list_short_links(
        self,
        db: AsyncSession,
        skip: int = 0,
        limit: int = 100,
    ) -> List[ShortLink]:
        try:
            return await self.url_repository.list_links(db, skip=skip, limit=limit)
        except RepositoryError as e:
            logger.error(f"Error retrieving short links: {e}")
            raise RecordRetrievalError(f"Failed to list short links: {e}") from e

    def _code_lengths(self) -> range:
        start = self.settings.URL_CODE_LENGTH
        return range(start, start + self.settings.URL_CODE_MAX_LENGTH_INCREASE + 1)

    def _is_valid_url(self, url) -> bool:
        """
        Check if a URL is an absolute http(s) URL with a host.

        Stricter than a plain request-URI parse on purpose: URLs without a
        host (``http://``, ``http://:80``) and URLs containing whitespace
        anywhere are rejected.

        Args:
            url: URL to validate

        Returns:
            bool: True if the URL is valid, False otherwise
        """
        if not isinstance(url, str) or not url.startswith(ALLOWED_URL_PREFIXES):
            return False
        if any(ch.isspace() or ord(ch) < 32 or ord(ch) == 127 for ch in url):
            return False
        try:
            parts = urlsplit(url)
        except ValueError:
            return False
        return bool(parts.hostname)
