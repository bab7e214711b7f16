"""Display formatting of game timestamps.

Game times arrive as ISO-8601 UTC instants ("2025-01-15T00:30:00.000Z") and
are always shown in India Standard Time with English names, upper-cased.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

DISPLAY_TZ = timezone(timedelta(hours=5, minutes=30), "IST")
INVALID_DATE = "INVALID DATE"

FULL_DATE = "full_date"      # WED JAN 15
TIME_OF_DAY = "time_of_day"  # 7:30 PM
MONTH_YEAR = "month_year"    # JANUARY 2025

_TIMESTAMP_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%dT%H:%M:%SZ",
)

# strptime alone accepts 1-digit fields and short fractions
_TIMESTAMP_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z", re.ASCII)

# Fixed English names so output does not depend on the process locale
_DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_gametime(timestamp: str) -> datetime | None:
    """Parse an ISO-8601 UTC instant. Returns None if it is malformed."""
    if not isinstance(timestamp, str):
        return None
    if not _TIMESTAMP_SHAPE.fullmatch(timestamp):
        return None
    for fmt in _TIMESTAMP_FORMATS:
        try:
            dt = datetime.strptime(timestamp, fmt)
            return dt.replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    return None


def format_datetime(timestamp: str, pattern: str) -> str:
    """Render a timestamp with one of the display patterns.

    Malformed timestamps give INVALID_DATE instead of raising, so a single
    bad record never breaks the whole list.
    """
    if pattern not in _RENDERERS:
        raise ValueError(f"Unknown date pattern: {pattern!r}")
    dt = parse_gametime(timestamp)
    if dt is None:
        return INVALID_DATE
    local = dt.astimezone(DISPLAY_TZ)
    return _RENDERERS[pattern](local).upper()


def full_date(timestamp: str) -> str:
    return format_datetime(timestamp, FULL_DATE)


def game_time(timestamp: str) -> str:
    return format_datetime(timestamp, TIME_OF_DAY)


def header_date(timestamp: str) -> str:
    return format_datetime(timestamp, MONTH_YEAR)


def current_timestamp(now: datetime | None = None) -> str:
    """The current instant in the same format as game timestamps."""
    if now is None:
        now = datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def _render_full_date(dt: datetime) -> str:
    return f"{_DAY_ABBR[dt.weekday()]} {_MONTH_NAMES[dt.month - 1][:3]} {dt.day}"


def _render_time_of_day(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def _render_month_year(dt: datetime) -> str:
    return f"{_MONTH_NAMES[dt.month - 1]} {dt.year}"


_RENDERERS = {
    FULL_DATE: _render_full_date,
    TIME_OF_DAY: _render_time_of_day,
    MONTH_YEAR: _render_month_year,
}
