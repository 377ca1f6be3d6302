from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, Iterable, Iterator, List, Optional
import statistics

from schemas.records import NurseRecord


@dataclass
class NurseStats:
    """Running totals for one staff nurse during a single scheduling run."""

    nurse: NurseRecord
    total_hours: int = 0
    night_shift_count: int = 0
    weekend_shift_count: int = 0
    day_shift_count: int = 0
    shift_count: int = 0
    consecutive_days: int = 0
    last_worked_date: Optional[date] = None
    last_shift_was_night: bool = False

    def worked_on(self, on_date: date) -> bool:
        return self.last_worked_date == on_date

    def worked_day_before(self, on_date: date) -> bool:
        return (
            self.last_worked_date is not None
            and self.last_worked_date == on_date - timedelta(days=1)
        )


class NurseStatsLedger:
    """
    Per-nurse statistics keyed by nurse id.

    Only staff nurses are tracked; the responsible nurse's workload does not
    take part in fairness balancing. Iteration follows the order the staff
    list was given in.
    """

    def __init__(self, staff: Iterable[NurseRecord] = ()):
        self._stats: Dict[str, NurseStats] = {}
        self.initialize(staff)

    def initialize(self, staff: Iterable[NurseRecord]) -> None:
        """Reset the ledger to zeroed stats for each nurse in `staff`."""
        self._stats = {nurse.id: NurseStats(nurse=nurse) for nurse in staff}

    def get(self, nurse_id: str) -> NurseStats:
        return self._stats[nurse_id]

    def __contains__(self, nurse_id: str) -> bool:
        return nurse_id in self._stats

    def __iter__(self) -> Iterator[NurseStats]:
        return iter(self._stats.values())

    def __len__(self) -> int:
        return len(self._stats)

    def all(self) -> List[NurseStats]:
        return list(self._stats.values())

    def mean_of(self, attr: str) -> float:
        """Mean of one stats attribute across every tracked nurse (0 when empty)."""
        values = [getattr(s, attr) for s in self._stats.values()]
        return statistics.mean(values) if values else 0.0

    def record(
        self,
        nurse_id: str,
        hours: int,
        is_night: bool,
        is_weekend: bool,
        on_date: date,
    ) -> NurseStats:
        """Book one worked shift for `nurse_id` on `on_date`."""
        stats = self._stats[nurse_id]

        stats.total_hours += hours
        stats.shift_count += 1
        if is_night:
            stats.night_shift_count += 1
        else:
            stats.day_shift_count += 1
        if is_weekend:
            stats.weekend_shift_count += 1

        # streak continues only if the previous shift was on the day before
        if stats.worked_day_before(on_date):
            stats.consecutive_days += 1
        else:
            stats.consecutive_days = 1

        stats.last_worked_date = on_date
        stats.last_shift_was_night = is_night
        return stats
