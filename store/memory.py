import uuid
from dataclasses import replace
from datetime import date
from typing import Dict, List, Optional

from core.models import Assignment, ShiftDemand
from exceptions.custom_errors import (
    InvalidLeaveError,
    LeaveNotFoundError,
    NurseConflictError,
    NurseNotFoundError,
    ScheduleConflictError,
    ScheduleNotFoundError,
)
from schemas.records import LeaveRecord, NurseRecord, ScheduleRecord
from store.base import RosterStore
from utils.constants import RESPONSIBLE_ROLE, STAFF_ROLE
from utils.date_utils import month_bounds, overlaps, parse_month
from utils.logger import get_logger

logger = get_logger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class InMemoryRosterStore(RosterStore):
    """Keeps nurses, leaves, schedules, shifts and assignments in process memory."""

    def __init__(self):
        self.nurses: Dict[str, NurseRecord] = {}
        self.leaves: Dict[str, LeaveRecord] = {}
        self.schedules: Dict[str, ScheduleRecord] = {}
        self.shifts: Dict[str, List[ShiftDemand]] = {}
        self.assignments: Dict[str, List[Assignment]] = {}

    # --- nurses ---
    async def create_nurse(self, name: str, role: str) -> NurseRecord:
        if role == RESPONSIBLE_ROLE and await self.find_responsible_nurse() is not None:
            raise NurseConflictError("A responsible nurse already exists.")
        nurse = NurseRecord(id=_new_id(), name=name.strip(), role=role)
        self.nurses[nurse.id] = nurse
        return nurse

    async def list_nurses(self) -> List[NurseRecord]:
        return list(self.nurses.values())

    async def get_nurse(self, nurse_id: str) -> NurseRecord:
        if nurse_id not in self.nurses:
            raise NurseNotFoundError(f"Nurse {nurse_id} not found.")
        return self.nurses[nurse_id]

    async def delete_nurse(self, nurse_id: str) -> None:
        nurse = await self.get_nurse(nurse_id)
        if nurse.role == RESPONSIBLE_ROLE:
            raise NurseConflictError("The responsible nurse cannot be deleted.")
        del self.nurses[nurse_id]
        self.leaves = {k: l for k, l in self.leaves.items() if l.nurse_id != nurse_id}

    async def find_responsible_nurse(self) -> Optional[NurseRecord]:
        return next((n for n in self.nurses.values() if n.role == RESPONSIBLE_ROLE), None)

    async def find_staff_nurses(self) -> List[NurseRecord]:
        return [n for n in self.nurses.values() if n.role == STAFF_ROLE]

    # --- leaves ---
    async def create_leave(
        self,
        nurse_id: str,
        leave_type: str,
        start_date: date,
        end_date: date,
        notes: Optional[str] = None,
    ) -> LeaveRecord:
        await self.get_nurse(nurse_id)
        if end_date < start_date:
            raise InvalidLeaveError("Leave end date cannot be before its start date.")
        leave = LeaveRecord(
            id=_new_id(),
            nurse_id=nurse_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            notes=notes,
        )
        self.leaves[leave.id] = leave
        return leave

    async def list_leaves(
        self, month: Optional[str] = None, nurse_id: Optional[str] = None
    ) -> List[LeaveRecord]:
        leaves = list(self.leaves.values())
        if nurse_id is not None:
            leaves = [l for l in leaves if l.nurse_id == nurse_id]
        if month is not None:
            first, last = month_bounds(*parse_month(month))
            leaves = [l for l in leaves if overlaps(l.start_date, l.end_date, first, last)]
        return leaves

    async def delete_leave(self, leave_id: str) -> None:
        if leave_id not in self.leaves:
            raise LeaveNotFoundError(f"Leave {leave_id} not found.")
        del self.leaves[leave_id]

    async def find_leaves(self, month: str) -> List[LeaveRecord]:
        return await self.list_leaves(month=month)

    # --- schedules ---
    async def create_schedule(self, month: str) -> ScheduleRecord:
        parse_month(month)
        if await self.find_schedule_by_month(month) is not None:
            raise ScheduleConflictError(f"A schedule already exists for {month}.")
        schedule = ScheduleRecord(id=_new_id(), month=month)
        self.schedules[schedule.id] = schedule
        return schedule

    async def list_schedules(self) -> List[ScheduleRecord]:
        return sorted(self.schedules.values(), key=lambda s: s.month, reverse=True)

    async def get_schedule(self, schedule_id: str) -> ScheduleRecord:
        if schedule_id not in self.schedules:
            raise ScheduleNotFoundError(f"Schedule {schedule_id} not found.")
        return self.schedules[schedule_id]

    async def find_schedule_by_month(self, month: str) -> Optional[ScheduleRecord]:
        return next((s for s in self.schedules.values() if s.month == month), None)

    async def publish_schedule(self, schedule_id: str) -> ScheduleRecord:
        schedule = await self.get_schedule(schedule_id)
        if schedule.status == "published":
            raise ScheduleConflictError("Schedule is already published.")
        schedule = schedule.model_copy(update={"status": "published"})
        self.schedules[schedule_id] = schedule
        return schedule

    async def delete_schedule(self, schedule_id: str, force: bool = False) -> None:
        """Delete a schedule with its shifts and assignments. Published schedules need `force`."""
        schedule = await self.get_schedule(schedule_id)
        if schedule.status == "published" and not force:
            raise ScheduleConflictError("A published schedule cannot be deleted.")
        del self.schedules[schedule_id]
        self.shifts.pop(schedule_id, None)
        self.assignments.pop(schedule_id, None)

    async def update_schedule_fairness_score(self, schedule_id: str, overall: float) -> None:
        schedule = await self.get_schedule(schedule_id)
        self.schedules[schedule_id] = schedule.model_copy(update={"fairness_score": overall})

    # --- shifts & assignments ---
    async def bulk_create_shifts(self, demands: List[ShiftDemand]) -> List[ShiftDemand]:
        created = [replace(d, id=_new_id()) for d in demands]
        for shift in created:
            self.shifts.setdefault(shift.schedule_id, []).append(shift)
        return created

    async def bulk_create_assignments(self, assignments: List[Assignment]) -> int:
        """Store assignments under their shift's schedule; unknown shift ids are skipped."""
        schedule_by_shift = {
            s.id: schedule_id
            for schedule_id, shifts in self.shifts.items()
            for s in shifts
        }
        stored = 0
        for a in assignments:
            schedule_id = schedule_by_shift.get(a.shift_id)
            if schedule_id is None:
                logger.warning("Assignment for unknown shift %s skipped", a.shift_id)
                continue
            self.assignments.setdefault(schedule_id, []).append(a)
            stored += 1
        return stored

    async def shifts_for(self, schedule_id: str) -> List[ShiftDemand]:
        return list(self.shifts.get(schedule_id, []))

    async def assignments_for(self, schedule_id: str) -> List[Assignment]:
        return list(self.assignments.get(schedule_id, []))
