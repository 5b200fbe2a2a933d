"""Test utilities for taskhub tests."""

import random
import string
from datetime import date, datetime
from typing import Optional

from taskhub.models import ShortLink, Task, TaskContributor, User


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8)}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


async def create_test_link(
    db,
    original_url: Optional[str] = None,
    short_code: Optional[str] = None,
    creator_id: Optional[int] = None,
    created_at: Optional[datetime] = None,
) -> ShortLink:
    """Create and persist a test ShortLink in the database."""
    link = ShortLink(
        original_url=original_url or random_url(),
        short_code=short_code or random_string(5),
        creator_id=creator_id,
        created_at=created_at or datetime.utcnow(),
    )
    db.add(link)
    await db.flush()
    await db.refresh(link)
    return link


async def create_test_user(
    db,
    user_name: str = "Ada",
    user_email: Optional[str] = None,
    user_bdate: date = date(1990, 5, 17),
) -> User:
    user = User(
        user_name=user_name,
        user_email=user_email or f"{random_string(6).lower()}@example.com",
        user_bdate=user_bdate,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


async def create_test_task(
    db,
    user_creator_id: int,
    task_description: str = "Write the report",
    task_start_date: date = date(2024, 3, 1),
    task_deadline_date: date = date(2024, 3, 15),
) -> Task:
    task = Task(
        user_creator_id=user_creator_id,
        task_description=task_description,
        task_start_date=task_start_date,
        task_deadline_date=task_deadline_date,
    )
    db.add(task)
    await db.flush()
    await db.refresh(task)
    return task


async def create_test_contributor(
    db,
    user_id: int,
    task_id: int,
    assigned_date: date = date(2024, 3, 2),
) -> TaskContributor:
    contributor = TaskContributor(user_id=user_id, task_id=task_id, assigned_date=assigned_date)
    db.add(contributor)
    await db.flush()
    await db.refresh(contributor)
    return contributor
