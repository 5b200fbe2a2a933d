"""API request and response schemas.

This module contains Pydantic models for API response serialization that
are not table schemas themselves. JSON field names follow the columns of
the underlying tables.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ShortLinkRead(BaseModel):
    """Response schema for a stored short link."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int = Field(alias="url_short_id")
    creator_id: Optional[int] = Field(default=None, alias="user_creator_id")
    original_url: str = Field(alias="url_base")
    short_code: str = Field(alias="url_short")
    created_at: datetime = Field(alias="url_created_date")


class ErrorResponse(BaseModel):
    """Response schema for errors."""
    detail: str
