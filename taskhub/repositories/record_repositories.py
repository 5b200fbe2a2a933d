"""Repositories for users, tasks and task contributors.

These tables are plain records: list and create operations from
``BaseRepository`` cover everything the API needs.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.models.user import User, UserCreate
from taskhub.models.task import Task, TaskContributor
from taskhub.repositories.base import BaseRepository


class UserRepository(BaseRepository[User, UserCreate]):
    """Repository for User records."""

    def __init__(self):
        super().__init__(User)

    async def list_users(self, db: AsyncSession, skip: int = 0, limit: int = 100) -> List[User]:
        return await self.get_all(db, skip=skip, limit=limit, order_by=User.user_id)


class TaskRepository(BaseRepository[Task, Task]):
    """Repository for Task records."""

    def __init__(self):
        super().__init__(Task)

    async def list_tasks(self, db: AsyncSession, skip: int = 0, limit: int = 100) -> List[Task]:
        return await self.get_all(db, skip=skip, limit=limit, order_by=Task.task_id)


class TaskContributorRepository(BaseRepository[TaskContributor, TaskContributor]):
    """Repository for TaskContributor records."""

    def __init__(self):
        super().__init__(TaskContributor)

    async def list_contributors(
        self, db: AsyncSession, skip: int = 0, limit: int = 100
    ) -> List[TaskContributor]:
        return await self.get_all(db, skip=skip, limit=limit, order_by=TaskContributor.task_con_id)
