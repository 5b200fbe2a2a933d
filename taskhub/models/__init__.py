"""
Data models for the taskhub application.

This module imports and exports all SQLModel models used in the application.
"""

# First import SQLModel itself to ensure metadata is initialized
from sqlmodel import SQLModel

from taskhub.models.dates import CalendarDate, format_calendar_date, parse_calendar_date

# Table models in dependency order (parent before child)
from taskhub.models.user import User, UserCreate, UserRead
from taskhub.models.task import Task, TaskRead, TaskContributor, TaskContributorRead
from taskhub.models.short_link import ShortLink

__all__ = [
    "SQLModel",
    # Value types
    "CalendarDate",
    "format_calendar_date",
    "parse_calendar_date",
    # User models
    "User",
    "UserCreate",
    "UserRead",
    # Task models
    "Task",
    "TaskRead",
    "TaskContributor",
    "TaskContributorRead",
    # Short link models
    "ShortLink",
]
