"""Session management for database operations.

This module provides utilities for handling SQLAlchemy async sessions
with proper lifecycle management, error handling, and transaction support.
It includes dependency injection patterns optimized for FastAPI.
"""

from typing import AsyncGenerator, Callable, Optional, TypeVar
import logging
import inspect
from functools import wraps

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

# Generic return type for function decorators
T = TypeVar("T")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions.

    Opens a session on the application's ``Database`` for the lifetime of
    the request. It properly manages the session lifecycle, rolling back
    and closing even in case of exceptions.

    Yields:
        AsyncSession: A SQLAlchemy async session object.

    Example:
        ```python
        @router.get("/users")
        async def list_users(db: AsyncSession = Depends(get_db)):
            return await repository.get_all(db)
        ```
    """
    database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
        except SQLAlchemyError:
            logger.exception("Database error occurred")
            await session.rollback()
            raise
        except Exception:
            await session.rollback()
            raise


def db_transaction(db_param_name: Optional[str] = None) -> Callable:
    """Decorator to wrap functions in a database transaction.

    Automatically finds the database session parameter, commits on success or
    rolls back on error. The session parameter is located by name when
    ``db_param_name`` is given, otherwise by its ``AsyncSession`` annotation.

    Args:
        db_param_name: Optional name of the database session parameter.

    Returns:
        Callable: Decorator function

    Example:
        ```python
        @db_transaction(db_param_name="db")
        async def create_user(self, db: AsyncSession, data: UserCreate) -> User:
            ...
        ```

    Raises:
        ValueError: If no database session is passed to the wrapped function
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        parameters = inspect.signature(func).parameters
        db_param_pos = None
        db_param_key = None

        for i, (param_name, param) in enumerate(parameters.items()):
            is_async_session = param.annotation is AsyncSession or param.annotation == "AsyncSession"

            if db_param_name and param_name == db_param_name:
                db_param_pos = i
                db_param_key = param_name
                break
            elif is_async_session and db_param_name is None:
                db_param_pos = i
                db_param_key = param_name
                break

        if db_param_key is None:
            logger.warning(
                f"Unable to find database session parameter in function '{func.__name__}'"
            )

        @wraps(func)
        async def wrapper(*args, **kwargs):
            db = None

            if db_param_key is not None and db_param_key in kwargs:
                db = kwargs[db_param_key]
            elif db_param_pos is not None and len(args) > db_param_pos:
                db = args[db_param_pos]
            else:
                for value in list(args) + list(kwargs.values()):
                    if isinstance(value, AsyncSession):
                        db = value
                        break

            if db is None:
                raise ValueError(
                    f"Database session not found in function arguments for '{func.__name__}'. "
                    f"Ensure a parameter of type AsyncSession is passed to the function."
                )

            try:
                result = await func(*args, **kwargs)
                await db.commit()
                return result
            except Exception as e:
                await db.rollback()
                logger.warning(f"Transaction rolled back in '{func.__name__}': {e}")
                raise

        return wrapper
    return decorator
