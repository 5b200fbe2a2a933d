"""Base repository implementation for the taskhub application.

This module provides a generic BaseRepository class that follows the Repository pattern
for database operations, serving as a foundation for more specific repositories.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
import logging

from pydantic import BaseModel
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

# Type variable for model types
T = TypeVar("T", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base exception for repository errors."""
    pass


class DuplicateEntityError(RepositoryError):
    """Exception raised when a unique constraint is violated."""

    def __init__(self, model_type: Type[SQLModel], field_name: str, value: Any):
        self.model_type = model_type
        self.field_name = field_name
        self.value = value
        model_name = getattr(model_type, "__name__", "Entity")
        super().__init__(f"{model_name} with {field_name}={value} already exists")


class BaseRepository(Generic[T, CreateSchemaType]):
    """
    Base repository implementing common operations for SQLModel entities.

    This generic class provides a foundation for specific repositories,
    implementing standard database operations and error handling.

    Type parameters:
        T: The SQLModel type this repository manages
        CreateSchemaType: The Pydantic model type for creation operations
    """

    def __init__(self, model_type: Type[T]):
        """
        Initialize the repository with a specific model type.

        Args:
            model_type: The SQLModel class this repository will work with
        """
        self.model_type = model_type

    async def get_all(
        self,
        db: AsyncSession,
        skip: int = 0,
        limit: int = 100,
        order_by: Optional[Any] = None
    ) -> List[T]:
        """
        Get all entities with pagination support.

        Args:
            db: Database session
            skip: Number of records to skip (for pagination)
            limit: Maximum number of records to return
            order_by: SQLAlchemy column to order by

        Returns:
            List of entities
        """
        try:
            query = select(self.model_type)
            if order_by is not None:
                query = query.order_by(order_by)
            query = query.offset(skip).limit(limit)

            result = await db.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model_type.__name__} list: {e}")
            raise RepositoryError(f"Database error retrieving entities: {e}") from e

    async def create(self, db: AsyncSession, data: Union[CreateSchemaType, Dict[str, Any]]) -> T:
        """
        Create a new entity.

        Args:
            db: Database session
            data: Entity data (either as a Pydantic model or dictionary)

        Returns:
            The created entity

        Raises:
            RepositoryError: On database errors
        """
        try:
            if isinstance(data, BaseModel):
                data_dict = data.model_dump(exclude_unset=True)
            else:
                data_dict = data

            entity = self.model_type(**data_dict)
            db.add(entity)
            await db.flush()  # Flush to generate ID but don't commit yet

            await db.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.model_type.__name__}: {e}")
            await db.rollback()
            raise RepositoryError(f"Database error creating entity: {e}") from e

    async def count(self, db: AsyncSession, **filters) -> int:
        """
        Count entities, optionally restricted by field=value filters.

        Args:
            db: Database session
            **filters: Field=value pairs to filter by

        Returns:
            Number of matching entities

        Raises:
            RepositoryError: On database errors
        """
        try:
            conditions = [getattr(self.model_type, field) == value for field, value in filters.items()]
            query = select(func.count()).select_from(self.model_type)
            if conditions:
                query = query.where(*conditions)
            result = await db.execute(query)
            return result.scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model_type.__name__} records: {e}")
            raise RepositoryError(f"Database error counting entities: {e}") from e

