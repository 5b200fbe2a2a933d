"""Short link data model.

This module defines the ShortLink model mapping short codes to original URLs.
Attribute names are the ones used in code; column names follow the
existing ``url_shorts`` table.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlmodel import Field, SQLModel


class ShortLink(SQLModel, table=True):
    """
    Mapping between a short code and the original URL it redirects to.

    Rows are created once by the shortener and never updated. The unique
    constraint on ``url_short`` is what guarantees code uniqueness under
    concurrent submissions; the application-level check only avoids
    pointless insert attempts.
    """

    __tablename__ = "url_shorts"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column("url_short_id", Integer, primary_key=True, autoincrement=True),
    )
    creator_id: Optional[int] = Field(
        default=None,
        sa_column=Column("user_creator_id", Integer, nullable=True),
        description="User who created the link; not enforced as a foreign key",
    )
    original_url: str = Field(
        sa_column=Column("url_base", Text, nullable=False),
        description="The original (long) URL to redirect to",
    )
    short_code: str = Field(
        sa_column=Column("url_short", String(32), nullable=False, unique=True),
        description="Unique code for the shortened URL",
    )
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column=Column("url_created_date", DateTime, nullable=False),
        description="Timestamp when this short link was created",
    )
