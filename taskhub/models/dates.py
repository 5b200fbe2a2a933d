"""Calendar date value type.

Dates of users, tasks and contributors travel over the API as plain
``YYYY-MM-DD`` strings, independent of how the store represents them.
"""

import re
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

CALENDAR_DATE_FORMAT = "%Y-%m-%d"

_CALENDAR_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_calendar_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If the text is not exactly in calendar date form or
            names a day that does not exist.
    """
    if not isinstance(value, str) or not _CALENDAR_DATE_RE.match(value):
        raise ValueError(f"Expected a date formatted as YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, CALENDAR_DATE_FORMAT).date()


def format_calendar_date(value: date) -> str:
    return value.strftime(CALENDAR_DATE_FORMAT)


def _coerce_calendar_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_calendar_date(value)


CalendarDate = Annotated[
    date,
    BeforeValidator(_coerce_calendar_date),
    PlainSerializer(format_calendar_date, return_type=str, when_used="json"),
]
