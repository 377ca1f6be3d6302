from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class DayDescriptor:
    """One calendar day of the month being scheduled."""

    date: date
    is_weekend: bool = False
    is_holiday: bool = False

    @property
    def is_off_day(self) -> bool:
        """Weekends and holidays are covered by a single 24h shift."""
        return self.is_weekend or self.is_holiday


@dataclass(frozen=True)
class ShiftDemand:
    """
    A shift that must be staffed on a given date.

    `id` is None until the store has persisted the shift.
    """

    date: date
    shift_type: str
    start_time: str
    end_time: str
    required_staff_count: int
    requires_responsible: bool
    id: Optional[str] = None
    schedule_id: Optional[str] = None


@dataclass(frozen=True)
class Assignment:
    shift_id: str
    nurse_id: str
    role: str = "staff"
    source: str = "algorithm"


@dataclass(frozen=True)
class FairnessScore:
    overall: float
    hours_score: float
    nights_score: float
    weekends_score: float
    hours_std_dev: float
    nights_std_dev: float
    weekends_std_dev: float


@dataclass(frozen=True)
class ShiftCoverage:
    shift: ShiftDemand
    current_staff: int
    current_responsible: int
    is_complete: bool
    status_message: str


@dataclass
class GenerationResult:
    schedule_id: str
    month: str
    fairness_score: FairnessScore
    shift_count: int
    assignment_count: int
    incomplete_shift_count: int
    warnings: List[str] = field(default_factory=list)
    elapsed_ms: float = 0.0
