"""Tests for the user and task services."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select

from taskhub.models.user import User, UserCreate
from taskhub.repositories.base import RepositoryError
from taskhub.repositories.record_repositories import (
    TaskContributorRepository,
    TaskRepository,
    UserRepository,
)
from taskhub.services.exceptions import RecordCreationError, RecordRetrievalError
from taskhub.services.records import TaskService, UserService
from tests.utils import create_test_task, create_test_user


@pytest.mark.asyncio
async def test_create_user_commits(test_db):
    service = UserService(UserRepository())
    data = UserCreate(user_name="Ada", user_email="ada@example.com", user_bdate="1990-05-17")

    user = await service.create_user(test_db, data)
    await test_db.rollback()

    result = await test_db.execute(select(User).where(User.user_id == user.user_id))
    stored = result.scalars().one()
    assert stored.user_bdate == date(1990, 5, 17)


@pytest.mark.asyncio
async def test_create_user_failure():
    repository = MagicMock(spec=UserRepository)
    repository.create = AsyncMock(side_effect=RepositoryError("insert failed"))
    db = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    data = UserCreate(user_name="Ada", user_email="ada@example.com", user_bdate="1990-05-17")

    with pytest.raises(RecordCreationError):
        await UserService(repository).create_user(db, data)

    db.rollback.assert_awaited_once()
    db.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_failure_is_retrieval_error():
    repository = MagicMock(spec=UserRepository)
    repository.list_users = AsyncMock(side_effect=RepositoryError("timeout"))

    with pytest.raises(RecordRetrievalError):
        await UserService(repository).list_users(MagicMock())


@pytest.mark.asyncio
async def test_list_tasks_and_contributors(test_db):
    user = await create_test_user(test_db)
    await create_test_task(test_db, user_creator_id=user.user_id)
    service = TaskService(TaskRepository(), TaskContributorRepository())

    assert len(await service.list_tasks(test_db)) == 1
    assert await service.list_contributors(test_db) == []
