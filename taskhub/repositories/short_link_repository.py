"""Short link repository for the taskhub application.

This module provides the ShortLinkRepository class, the persistence
collaborator of the shortener and the redirect resolver.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from taskhub.models.short_link import ShortLink
from taskhub.repositories.base import BaseRepository, RepositoryError, DuplicateEntityError

logger = logging.getLogger(__name__)


class ShortLinkRepository(BaseRepository[ShortLink, ShortLink]):
    """
    Repository for ShortLink model database operations.

    Provides the code lookups used by the uniqueness check and redirects,
    and an insert that reports unique constraint violations on the short
    code as ``DuplicateEntityError``.
    """

    def __init__(self):
        """Initialize the repository with the ShortLink model type."""
        super().__init__(ShortLink)

    async def count_by_code(self, db: AsyncSession, short_code: str) -> int:
        """
        Count short links carrying exactly this code.

        Raises:
            RepositoryError: On database errors
        """
        return await self.count(db, short_code=short_code)

    async def insert_short_link(
        self,
        db: AsyncSession,
        original_url: str,
        short_code: str,
        created_at: datetime,
        creator_id: Optional[int] = None,
    ) -> ShortLink:
        """
        Insert a new short link row.

        Args:
            db: Database session
            original_url: URL the code redirects to
            short_code: The code to store
            created_at: Creation timestamp
            creator_id: Optional id of the creating user

        Returns:
            The created ShortLink with its assigned id

        Raises:
            DuplicateEntityError: If the short code is already stored
            RepositoryError: On other database errors
        """
        link = ShortLink(
            original_url=original_url,
            short_code=short_code,
            created_at=created_at,
            creator_id=creator_id,
        )
        try:
            db.add(link)
            await db.flush()
            await db.refresh(link)
            return link
        except IntegrityError as e:
            await db.rollback()
            message = str(e).lower()
            if "unique" in message or "duplicate key" in message:
                raise DuplicateEntityError(self.model_type, "short_code", short_code) from e
            logger.error(f"Integrity error inserting short link: {e}")
            raise RepositoryError(f"Database error creating short link: {e}") from e
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error inserting short link: {e}")
            raise RepositoryError(f"Database error creating short link: {e}") from e

    async def find_original_url_by_code(self, db: AsyncSession, short_code: str) -> Optional[str]:
        """
        Find the original URL stored for a short code.

        Returns:
            The original URL if the code exists, None otherwise

        Raises:
            RepositoryError: On database errors
        """
        try:
            query = select(self.model_type.original_url).where(self.model_type.short_code == short_code)
            result = await db.execute(query)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise RepositoryError(f"Error retrieving URL by short code: {e}") from e

    async def list_links(self, db: AsyncSession, skip: int = 0, limit: int = 100) -> List[ShortLink]:
        """List short links in creation order."""
        return await self.get_all(db, skip=skip, limit=limit, order_by=self.model_type.id)
