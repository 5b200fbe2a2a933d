"""User data models."""
from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel

from taskhub.models.dates import CalendarDate


class UserBase(SQLModel):
    user_name: str = Field(max_length=255)
    user_email: str = Field(max_length=255)


class User(UserBase, table=True):
    """A registered user; creator of tasks and short links."""

    __tablename__ = "users"

    user_id: Optional[int] = Field(default=None, primary_key=True)
    user_bdate: date


class UserCreate(UserBase):
    """Schema for creating a user."""
    user_bdate: CalendarDate


class UserRead(UserBase):
    """Schema for reading a user."""
    user_id: int
    user_bdate: CalendarDate
