from datetime import date
from typing import Dict, List

from core.models import Assignment, DayDescriptor, ShiftDemand
from core.state import ScheduleState
from scheduler.priority import select_nurses_by_priority
from scheduler.rules import build_eligibility_filters
from utils.constants import (
    DAY_SHIFT,
    NIGHT_SHIFT,
    RESPONSIBLE_ROLE,
    SHIFT_HOURS,
    STAFF_ROLE,
    WEEKEND_SHIFT,
)
from utils.logger import get_logger

logger = get_logger(__name__)


class AssignmentExecutor:
    """
    Staff each shift of the month, one day at a time.

    Every selection is booked in the ledger before the next shift is
    considered, so same-day and streak checks always see the full history.
    """

    def __init__(self, state: ScheduleState):
        self.state = state
        self.filters = build_eligibility_filters(state)
        self.handlers = {
            DAY_SHIFT: self.assign_day_shift,
            NIGHT_SHIFT: self.assign_night_shift,
            WEEKEND_SHIFT: self.assign_weekend_shift,
        }

    def run(self, shifts_by_date: Dict[date, List[ShiftDemand]]) -> List[Assignment]:
        assignments: List[Assignment] = []
        for day in self.state.days:
            for shift in shifts_by_date.get(day.date, []):
                handler = self.handlers.get(shift.shift_type)
                if handler is None:
                    logger.warning("Unknown shift type %r on %s, skipped", shift.shift_type, day.date)
                    continue
                assignments.extend(handler(shift, day))
        return assignments

    def assign_day_shift(self, shift: ShiftDemand, day: DayDescriptor) -> List[Assignment]:
        """Responsible nurse (unless on leave) plus the required staff nurses."""
        assignments = []
        responsible = self.state.responsible
        if responsible is not None and not self.state.is_on_leave(responsible.id, day.date):
            assignments.append(
                Assignment(shift_id=shift.id, nurse_id=responsible.id, role=RESPONSIBLE_ROLE)
            )
        assignments.extend(
            self._assign_staff(shift, day, is_night=False, is_weekend=day.is_weekend)
        )
        return assignments

    def assign_night_shift(self, shift: ShiftDemand, day: DayDescriptor) -> List[Assignment]:
        return self._assign_staff(shift, day, is_night=True, is_weekend=day.is_weekend)

    def assign_weekend_shift(self, shift: ShiftDemand, day: DayDescriptor) -> List[Assignment]:
        # a 24h shift counts as a night for rest purposes
        return self._assign_staff(shift, day, is_night=True, is_weekend=True)

    def _assign_staff(
        self, shift: ShiftDemand, day: DayDescriptor, is_night: bool, is_weekend: bool
    ) -> List[Assignment]:
        eligible = self.filters[shift.shift_type].eligible(day)
        selected = select_nurses_by_priority(
            self.state.ledger, eligible, day, shift.required_staff_count
        )
        if len(selected) < shift.required_staff_count:
            logger.info(
                "⚠️ %s %s: %d of %d staff available",
                day.date,
                shift.shift_type,
                len(selected),
                shift.required_staff_count,
            )

        assignments = []
        for nurse in selected:
            assignments.append(Assignment(shift_id=shift.id, nurse_id=nurse.id, role=STAFF_ROLE))
            self.state.ledger.record(
                nurse.id,
                hours=SHIFT_HOURS[shift.shift_type],
                is_night=is_night,
                is_weekend=is_weekend,
                on_date=day.date,
            )
        return assignments
