from collections import OrderedDict
from datetime import date
from typing import Dict, Iterable, List, Optional

from core.models import DayDescriptor, ShiftDemand
from utils.constants import (
    DAY_SHIFT,
    NIGHT_SHIFT,
    SHIFT_TIMES,
    STAFF_PER_SHIFT,
    WEEKEND_SHIFT,
)


def make_demand(
    day: DayDescriptor,
    shift_type: str,
    requires_responsible: bool = False,
    schedule_id: Optional[str] = None,
) -> ShiftDemand:
    start, end = SHIFT_TIMES[shift_type]
    return ShiftDemand(
        date=day.date,
        shift_type=shift_type,
        start_time=start,
        end_time=end,
        required_staff_count=STAFF_PER_SHIFT,
        requires_responsible=requires_responsible,
        schedule_id=schedule_id,
    )


def plan_day(day: DayDescriptor, schedule_id: Optional[str] = None) -> List[ShiftDemand]:
    """Shifts required on one day: a 24h shift on weekends and holidays, day + night otherwise."""
    if day.is_off_day:
        return [make_demand(day, WEEKEND_SHIFT, schedule_id=schedule_id)]
    return [
        make_demand(day, DAY_SHIFT, requires_responsible=True, schedule_id=schedule_id),
        make_demand(day, NIGHT_SHIFT, schedule_id=schedule_id),
    ]


def plan_shift_demands(
    days: Iterable[DayDescriptor], schedule_id: Optional[str] = None
) -> List[ShiftDemand]:
    """Plan every shift of the month in chronological order, day before night."""
    demands = []
    for day in days:
        demands.extend(plan_day(day, schedule_id))
    return demands


def group_shifts_by_date(shifts: Iterable[ShiftDemand]) -> Dict[date, List[ShiftDemand]]:
    """Group shifts by date, keeping their planned order within each date."""
    grouped: Dict[date, List[ShiftDemand]] = OrderedDict()
    for shift in shifts:
        grouped.setdefault(shift.date, []).append(shift)
    return grouped
