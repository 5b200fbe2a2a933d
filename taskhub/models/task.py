"""
Task and task contributor data models.

Tasks are created by a user; contributors link further users to a task.
"""
from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel

from taskhub.models.dates import CalendarDate


class Task(SQLModel, table=True):
    """A unit of work with a start and a deadline date."""

    __tablename__ = "tasks"

    task_id: Optional[int] = Field(default=None, primary_key=True)
    user_creator_id: int = Field(foreign_key="users.user_id")
    task_description: str
    task_start_date: date
    task_deadline_date: date


class TaskRead(SQLModel):
    """Schema for reading a task."""
    task_id: int
    user_creator_id: int
    task_description: str
    task_start_date: CalendarDate
    task_deadline_date: CalendarDate


class TaskContributor(SQLModel, table=True):
    """Assignment of a user to a task."""

    __tablename__ = "tasks_contributors"

    task_con_id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.user_id")
    task_id: int = Field(foreign_key="tasks.task_id")
    assigned_date: date


class TaskContributorRead(SQLModel):
    """Schema for reading a task contributor."""
    task_con_id: int
    user_id: int
    task_id: int
    assigned_date: CalendarDate
