"""User, task and task contributor endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.api.dependencies import get_task_service, get_user_service
from taskhub.api.params import LimitParam, SkipParam
from taskhub.db.session import get_db
from taskhub.models.task import TaskContributorRead, TaskRead
from taskhub.models.user import UserCreate, UserRead
from taskhub.services.exceptions import RecordCreationError, RecordRetrievalError
from taskhub.services.records import TaskService, UserService

router = APIRouter(tags=["records"])


@router.get("/users", response_model=List[UserRead])
async def list_users(
    skip: int = SkipParam(),
    limit: int = LimitParam(),
    db: AsyncSession = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
):
    try:
        return await user_service.list_users(db, skip=skip, limit=limit)
    except RecordRetrievalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("/users", response_model=UserRead)
async def create_user(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db),
    user_service: UserService = Depends(get_user_service),
):
    """Create a user; ``user_bdate`` must be formatted as YYYY-MM-DD."""
    try:
        return await user_service.create_user(db, user_data)
    except RecordCreationError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/tasks", response_model=List[TaskRead])
async def list_tasks(
    skip: int = SkipParam(),
    limit: int = LimitParam(),
    db: AsyncSession = Depends(get_db),
    task_service: TaskService = Depends(get_task_service),
):
    try:
        return await task_service.list_tasks(db, skip=skip, limit=limit)
    except RecordRetrievalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/tasks_contributors", response_model=List[TaskContributorRead])
async def list_task_contributors(
    skip: int = SkipParam(),
    limit: int = LimitParam(),
    db: AsyncSession = Depends(get_db),
    task_service: TaskService = Depends(get_task_service),
):
    try:
        return await task_service.list_contributors(db, skip=skip, limit=limit)
    except RecordRetrievalError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
