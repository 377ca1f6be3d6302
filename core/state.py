from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from core.ledger import NurseStatsLedger
from core.models import Assignment, DayDescriptor, ShiftDemand
from schemas.records import LeaveRecord, NurseRecord


class RunPhase(str, Enum):
    """Phases of a scheduling run. Runs move strictly forward or to FAILED."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    SHIFTS_CREATED = "shifts_created"
    ASSIGNED = "assigned"
    SCORED = "scored"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ScheduleState:
    """
    A dataclass to hold all the state relevant to one scheduling run.
    """

    # run inputs
    schedule_id: str
    """Identifier of the schedule the shifts belong to."""
    month: str
    """The month being scheduled, as `YYYY-MM`."""
    responsible: Optional[NurseRecord] = None
    """The responsible nurse, once loaded."""
    staff: List[NurseRecord] = field(default_factory=list)
    """Staff nurses in the order the store returned them."""
    leaves: List[LeaveRecord] = field(default_factory=list)
    """Every leave overlapping the month, including preference leave."""
    days: List[DayDescriptor] = field(default_factory=list)
    """Day descriptors for the month in ascending order."""

    # collections to fill
    ledger: NurseStatsLedger = field(default_factory=NurseStatsLedger)
    """Running per-nurse statistics for staff nurses."""
    leaves_by_nurse: Dict[str, List[LeaveRecord]] = field(default_factory=dict)
    """Blocking leave records grouped by nurse id."""
    shifts: List[ShiftDemand] = field(default_factory=list)
    """Persisted shifts returned by the store."""
    assignments: List[Assignment] = field(default_factory=list)
    """Assignments produced by the run."""
    phase: RunPhase = RunPhase.UNINITIALIZED
    """Current phase of the run."""

    def index_leaves(self) -> None:
        """Group blocking leave records by nurse for fast lookups."""
        self.leaves_by_nurse = {}
        for leave in self.leaves:
            if leave.blocks_assignment and leave.has_range:
                self.leaves_by_nurse.setdefault(leave.nurse_id, []).append(leave)

    def is_on_leave(self, nurse_id: str, on_date: date) -> bool:
        return any(l.covers(on_date) for l in self.leaves_by_nurse.get(nurse_id, ()))

    def advance(self, phase: RunPhase) -> None:
        self.phase = phase
