from datetime import date
from typing import Callable, Iterable, List, Optional

from core.models import DayDescriptor
from utils.date_utils import add_days, month_bounds, normalise_weekend_days

HolidayPredicate = Callable[[date], bool]


def no_holidays(_day: date) -> bool:
    """Default holiday calendar: no public holidays."""
    return False


def build_month_days(
    year: int,
    month_index: int,
    weekend_days: Optional[Iterable[int]] = None,
    is_holiday: Optional[HolidayPredicate] = None,
) -> List[DayDescriptor]:
    """
    Expand a month into ordered day descriptors.

    Args:
        year: Calendar year.
        month_index: Zero-based month (0 = January).
        weekend_days: Weekday numbers (Mon=0 ... Sun=6) treated as weekend.
            Defaults to the configured weekend preset (Saturday and Sunday).
            Pass an empty set to schedule every day as a weekday.
        is_holiday: Predicate marking public holidays. Defaults to none.

    Returns:
        One DayDescriptor per calendar day, in ascending date order.
    """
    weekend = normalise_weekend_days(weekend_days)
    holiday = is_holiday or no_holidays
    first, last = month_bounds(year, month_index)

    days = []
    current = first
    while current <= last:
        days.append(
            DayDescriptor(
                date=current,
                is_weekend=current.weekday() in weekend,
                is_holiday=bool(holiday(current)),
            )
        )
        current = add_days(current, 1)
    return days
