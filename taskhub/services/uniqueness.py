"""Short code uniqueness check."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.repositories.base import RepositoryError
from taskhub.repositories.short_link_repository import ShortLinkRepository

logger = logging.getLogger(__name__)


class UniquenessChecker:
    """
    Tells whether a candidate short code is already assigned.

    By default a failing lookup propagates as ``RepositoryError``. With
    ``fail_open`` set, the failure is logged, the session is rolled back so
    the following insert runs in a fresh transaction, and the code is
    reported as free. The store's unique constraint still rejects a real
    duplicate on insert.
    """

    def __init__(self, url_repository: ShortLinkRepository, fail_open: bool = False):
        self.url_repository = url_repository
        self.fail_open = fail_open

    async def is_taken(self, db: AsyncSession, short_code: str) -> bool:
        try:
            count = await self.url_repository.count_by_code(db, short_code)
        except RepositoryError as e:
            if not self.fail_open:
                raise
            # A failed statement leaves the transaction aborted
            await db.rollback()
            logger.warning(f"Uniqueness check for '{short_code}' failed, treating code as free: {e}")
            return False
        return count > 0
