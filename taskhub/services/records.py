"""Services for user, task and task contributor records.

These wrap the record repositories, translating repository failures into
service errors for the API layer.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.db.session import db_transaction
from taskhub.models.task import Task, TaskContributor
from taskhub.models.user import User, UserCreate
from taskhub.repositories.base import RepositoryError
from taskhub.repositories.record_repositories import (
    TaskContributorRepository,
    TaskRepository,
    UserRepository,
)
from taskhub.services.exceptions import RecordCreationError, RecordRetrievalError

logger = logging.getLogger(__name__)


class UserService:
    """List and create users."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def list_users(self, db: AsyncSession, skip: int = 0, limit: int = 100) -> List[User]:
        try:
            return await self.user_repository.list_users(db, skip=skip, limit=limit)
        except RepositoryError as e:
            logger.error(f"Error retrieving users: {e}")
            raise RecordRetrievalError(f"Failed to list users: {e}") from e

    @db_transaction(db_param_name="db")
    async def create_user(self, db: AsyncSession, data: UserCreate) -> User:
        """
        Insert a user and return it with its assigned id.

        Raises:
            RecordCreationError: If the insert fails
        """
        try:
            user = await self.user_repository.create(db, data)
        except RepositoryError as e:
            logger.error(f"Error creating user: {e}")
            raise RecordCreationError(f"Failed to create user: {e}") from e
        logger.info(f"Created user {user.user_id}")
        return user


class TaskService:
    """List tasks and their contributors."""

    def __init__(
        self,
        task_repository: TaskRepository,
        contributor_repository: TaskContributorRepository,
    ):
        self.task_repository = task_repository
        self.contributor_repository = contributor_repository

    async def list_tasks(self, db: AsyncSession, skip: int = 0, limit: int = 100) -> List[Task]:
        try:
            return await self.task_repository.list_tasks(db, skip=skip, limit=limit)
        except RepositoryError as e:
            logger.error(f"Error retrieving tasks: {e}")
            raise RecordRetrievalError(f"Failed to list tasks: {e}") from e

    async def list_contributors(
        self, db: AsyncSession, skip: int = 0, limit: int = 100
    ) -> List[TaskContributor]:
        try:
            return await self.contributor_repository.list_contributors(db, skip=skip, limit=limit)
        except RepositoryError as e:
            logger.error(f"Error retrieving task contributors: {e}")
            raise RecordRetrievalError(f"Failed to list task contributors: {e}") from e
