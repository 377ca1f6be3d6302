import calendar
import os
import re
from datetime import date, timedelta
from typing import FrozenSet, Iterable, Optional, Tuple

from exceptions.custom_errors import InvalidMonthError
from utils.constants import DEFAULT_WEEKEND, WEEKEND_PRESETS

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def parse_month(month: str) -> Tuple[int, int]:
    """Parse `YYYY-MM` into `(year, zero-based month index)`."""
    match = MONTH_PATTERN.match(str(month).strip())
    if not match:
        raise InvalidMonthError(f"Invalid month '{month}', expected YYYY-MM.")
    year, month_num = int(match.group(1)), int(match.group(2))
    if not 1 <= month_num <= 12:
        raise InvalidMonthError(f"Invalid month '{month}', month must be 01-12.")
    return year, month_num - 1


def format_month(year: int, month_index: int) -> str:
    return f"{year:04d}-{month_index + 1:02d}"


def month_bounds(year: int, month_index: int) -> Tuple[date, date]:
    """First and last date of a month (month_index is zero-based)."""
    days = calendar.monthrange(year, month_index + 1)[1]
    return date(year, month_index + 1, 1), date(year, month_index + 1, days)


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def overlaps(
    start: Optional[date], end: Optional[date], range_start: date, range_end: date
) -> bool:
    """Inclusive overlap test; open-ended ranges never overlap."""
    if start is None or end is None:
        return False
    return start <= range_end and end >= range_start


def days_in_range(
    start: Optional[date], end: Optional[date], range_start: date, range_end: date
) -> int:
    """Number of days of [start, end] falling inside [range_start, range_end]."""
    if not overlaps(start, end, range_start, range_end):
        return 0
    return (min(end, range_end) - max(start, range_start)).days + 1


def weekend_preset(name: Optional[str] = None) -> FrozenSet[int]:
    """
    Return the weekday numbers (Mon=0 ... Sun=6) of a named weekend preset.

    When `name` is not given the `WEEKEND_CONFIG` environment variable is used.
    Unknown names fall back to the default preset.
    """
    key = (name or os.getenv("WEEKEND_CONFIG") or DEFAULT_WEEKEND).strip().upper()
    return WEEKEND_PRESETS.get(key, WEEKEND_PRESETS[DEFAULT_WEEKEND])


def normalise_weekend_days(days: Optional[Iterable[int]]) -> FrozenSet[int]:
    if days is None:
        return weekend_preset()
    return frozenset(int(d) for d in days)
