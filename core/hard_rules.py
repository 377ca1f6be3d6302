from dataclasses import dataclass
from typing import Callable, Dict

from core.ledger import NurseStats
from core.models import DayDescriptor
from core.state import ScheduleState
from utils.constants import MAX_CONSECUTIVE_DAYS, MAX_NIGHT_SHIFTS, MAX_WEEKEND_SHIFTS

# (stats, day) -> True when the nurse may work
RuleCheck = Callable[[NurseStats, DayDescriptor], bool]


@dataclass
class HardRule:
    check: RuleCheck
    message: str


def define_hard_rules(state: ScheduleState) -> Dict[str, HardRule]:
    return {
        "On leave": HardRule(
            lambda s, day: not state.is_on_leave(s.nurse.id, day.date),
            "Nurse is on leave.",
        ),
        "Assigned today": HardRule(
            lambda s, day: not s.worked_on(day.date),
            "Nurse already works a shift on this date.",
        ),
        "Max consecutive": HardRule(
            lambda s, day: s.consecutive_days < MAX_CONSECUTIVE_DAYS,
            f"Nurse has already worked {MAX_CONSECUTIVE_DAYS} days in a row.",
        ),
        "Rest after night": HardRule(
            lambda s, day: not (s.worked_day_before(day.date) and s.last_shift_was_night),
            "Nurse worked a night shift the day before and must rest.",
        ),
        "Night after recent nights": HardRule(
            lambda s, day: not (s.worked_day_before(day.date) and s.night_shift_count > 0),
            "Nurse worked yesterday and already has night shifts this month.",
        ),
        "Max nights": HardRule(
            lambda s, day: s.night_shift_count < MAX_NIGHT_SHIFTS,
            f"Nurse has reached {MAX_NIGHT_SHIFTS} night shifts this month.",
        ),
        "Rest before weekend": HardRule(
            lambda s, day: not s.worked_day_before(day.date),
            "Nurse worked the day before a 24h shift.",
        ),
        "Max weekends": HardRule(
            lambda s, day: s.weekend_shift_count < MAX_WEEKEND_SHIFTS,
            f"Nurse has reached {MAX_WEEKEND_SHIFTS} weekend shifts this month.",
        ),
    }
