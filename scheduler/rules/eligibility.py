from typing import Dict, List

from core.constraint_manager import ConstraintManager
from core.hard_rules import define_hard_rules
from core.models import DayDescriptor
from core.state import ScheduleState
from schemas.records import NurseRecord
from utils.constants import DAY_SHIFT, NIGHT_SHIFT, WEEKEND_SHIFT

DAY_RULES = ("On leave", "Assigned today", "Max consecutive", "Rest after night")
NIGHT_RULES = DAY_RULES + ("Night after recent nights", "Max nights")
WEEKEND_RULES = ("On leave", "Rest before weekend", "Max weekends")

RULES_BY_SHIFT = {
    DAY_SHIFT: DAY_RULES,
    NIGHT_SHIFT: NIGHT_RULES,
    WEEKEND_SHIFT: WEEKEND_RULES,
}


def build_eligibility_filters(state: ScheduleState) -> Dict[str, ConstraintManager]:
    """Build one ConstraintManager per shift type, sharing the run state."""
    hard_rules = define_hard_rules(state)
    filters = {}
    for shift_type, keys in RULES_BY_SHIFT.items():
        cm = ConstraintManager(state, name=shift_type)
        for key in keys:
            cm.add_rule(key, hard_rules[key])
        filters[shift_type] = cm
    return filters


def get_eligible_staff_for_day(state: ScheduleState, day: DayDescriptor) -> List[NurseRecord]:
    return build_eligibility_filters(state)[DAY_SHIFT].eligible(day)


def get_eligible_staff_for_night(state: ScheduleState, day: DayDescriptor) -> List[NurseRecord]:
    return build_eligibility_filters(state)[NIGHT_SHIFT].eligible(day)


def get_eligible_staff_for_weekend(state: ScheduleState, day: DayDescriptor) -> List[NurseRecord]:
    return build_eligibility_filters(state)[WEEKEND_SHIFT].eligible(day)
