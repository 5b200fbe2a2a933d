"""Pagination parameters shared by the list endpoints.

``/users``, ``/tasks``, ``/tasks_contributors`` and ``/urls`` page through
rows in primary key order with ``skip``/``limit`` query parameters.
"""

from fastapi import Query

MAX_PAGE_SIZE = 1000


def LimitParam(default: int = 100) -> int:
    """
    Page size: at most ``MAX_PAGE_SIZE`` rows per request.

    Args:
        default: Rows returned when the client sends no ``limit``
    """
    return Query(
        default,
        ge=1,
        le=MAX_PAGE_SIZE,
        description=f"Number of rows to return (1-{MAX_PAGE_SIZE})"
    )


def SkipParam(default: int = 0) -> int:
    """Offset into the primary key ordered rows."""
    return Query(
        default,
        ge=0,
        description="Number of rows to skip before the page starts"
    )
