from typing import List

from core.hard_rules import HardRule
from core.models import DayDescriptor
from core.state import ScheduleState
from schemas.records import NurseRecord
from utils.logger import get_logger

logger = get_logger(__name__)


class ConstraintManager:
    def __init__(self, state: ScheduleState, name: str = "shift"):
        self.state = state
        self.name = name
        self.rules: list[tuple[str, HardRule]] = []

    def add_rule(self, key: str, rule: HardRule, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append((key, rule))

    def eligible(self, day: DayDescriptor) -> List[NurseRecord]:
        """Return the staff nurses passing every registered rule, in pool order."""
        pool = []
        for nurse in self.state.staff:
            stats = self.state.ledger.get(nurse.id)
            failed = next((k for k, r in self.rules if not r.check(stats, day)), None)
            if failed is None:
                pool.append(nurse)
            else:
                logger.debug(
                    "%s %s: %s excluded (%s)", day.date, self.name, nurse.name, failed
                )
        return pool
