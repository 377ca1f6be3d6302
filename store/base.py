from typing import List, Optional

from core.models import Assignment, ShiftDemand
from schemas.records import LeaveRecord, NurseRecord


class RosterStore:
    """
    Operations the scheduler needs from persistence.

    Every method is a coroutine. A scheduling run awaits each of them once.
    """

    async def find_responsible_nurse(self) -> Optional[NurseRecord]:
        raise NotImplementedError

    async def find_staff_nurses(self) -> List[NurseRecord]:
        raise NotImplementedError

    async def find_leaves(self, month: str) -> List[LeaveRecord]:
        """Leaves overlapping `month` (YYYY-MM)."""
        raise NotImplementedError

    async def bulk_create_shifts(self, demands: List[ShiftDemand]) -> List[ShiftDemand]:
        """Persist shifts in one operation; return them, in order, with ids set."""
        raise NotImplementedError

    async def bulk_create_assignments(self, assignments: List[Assignment]) -> int:
        """Persist assignments in one operation; return how many were stored."""
        raise NotImplementedError

    async def update_schedule_fairness_score(self, schedule_id: str, overall: float) -> None:
        raise NotImplementedError
