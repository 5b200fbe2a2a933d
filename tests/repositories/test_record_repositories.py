"""Tests for user, task and task contributor repositories."""

from datetime import date

import pytest

from taskhub.models.user import UserCreate
from taskhub.repositories.record_repositories import (
    TaskContributorRepository,
    TaskRepository,
    UserRepository,
)
from tests.utils import create_test_contributor, create_test_task, create_test_user


@pytest.mark.repository
class TestRecordRepositories:

    @pytest.mark.asyncio
    async def test_create_user(self, test_db):
        repository = UserRepository()
        data = UserCreate(user_name="Grace", user_email="grace@example.com", user_bdate="1985-12-09")

        user = await repository.create(test_db, data)

        assert user.user_id is not None
        assert user.user_bdate == date(1985, 12, 9)
        assert await repository.list_users(test_db) == [user]

    @pytest.mark.asyncio
    async def test_list_users_in_id_order(self, test_db):
        first = await create_test_user(test_db, user_name="First")
        second = await create_test_user(test_db, user_name="Second")

        users = await UserRepository().list_users(test_db)

        assert [user.user_id for user in users] == [first.user_id, second.user_id]

    @pytest.mark.asyncio
    async def test_list_users_empty(self, test_db):
        assert await UserRepository().list_users(test_db) == []

    @pytest.mark.asyncio
    async def test_list_tasks(self, test_db):
        user = await create_test_user(test_db)
        task = await create_test_task(test_db, user_creator_id=user.user_id)

        tasks = await TaskRepository().list_tasks(test_db)

        assert len(tasks) == 1
        assert tasks[0].task_id == task.task_id
        assert tasks[0].task_deadline_date == date(2024, 3, 15)

    @pytest.mark.asyncio
    async def test_list_contributors(self, test_db):
        owner = await create_test_user(test_db, user_name="Owner")
        helper = await create_test_user(test_db, user_name="Helper")
        task = await create_test_task(test_db, user_creator_id=owner.user_id)
        await create_test_contributor(test_db, user_id=helper.user_id, task_id=task.task_id)

        contributors = await TaskContributorRepository().list_contributors(test_db)

        assert len(contributors) == 1
        assert contributors[0].user_id == helper.user_id
        assert contributors[0].task_id == task.task_id
