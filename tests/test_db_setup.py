"""Basic tests to verify test DB setup."""

import pytest
from datetime import date, datetime
from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError

from taskhub.models import ShortLink, User


@pytest.mark.asyncio
async def test_tables_exist(test_engine):
    """Verify every table is created in the test database."""
    async with test_engine.connect() as conn:
        result = await conn.execute(text("SELECT name FROM sqlite_master WHERE type='table'"))
        tables = {row[0] for row in result.fetchall()}

    assert {"url_shorts", "users", "tasks", "tasks_contributors"} <= tables


@pytest.mark.asyncio
async def test_short_link_column_names(test_db):
    """Short links are stored under the legacy column names."""
    result = await test_db.execute(text("PRAGMA table_info('url_shorts')"))
    columns = {row[1] for row in result.fetchall()}

    assert columns == {"url_short_id", "user_creator_id", "url_base", "url_short", "url_created_date"}


@pytest.mark.asyncio
async def test_create_short_link_row(test_db):
    link = ShortLink(
        original_url="https://example.com",
        short_code="abc12",
        created_at=datetime.utcnow(),
    )
    test_db.add(link)
    await test_db.commit()

    result = await test_db.execute(select(ShortLink).where(ShortLink.short_code == "abc12"))
    retrieved = result.scalars().first()

    assert retrieved is not None
    assert retrieved.id is not None
    assert retrieved.original_url == "https://example.com"
    assert retrieved.creator_id is None


@pytest.mark.asyncio
async def test_short_code_unique_constraint(test_db):
    """The store itself rejects a second row with the same code."""
    test_db.add(ShortLink(original_url="https://a.example", short_code="same1"))
    await test_db.commit()

    test_db.add(ShortLink(original_url="https://b.example", short_code="same1"))
    with pytest.raises(IntegrityError):
        await test_db.commit()
    await test_db.rollback()


@pytest.mark.asyncio
async def test_user_round_trip(test_db):
    user = User(user_name="Ada", user_email="ada@example.com", user_bdate=date(1990, 5, 17))
    test_db.add(user)
    await test_db.commit()

    result = await test_db.execute(select(User))
    stored = result.scalars().one()
    assert stored.user_bdate == date(1990, 5, 17)
