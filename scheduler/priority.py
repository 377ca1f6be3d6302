from typing import List

from core.ledger import NurseStatsLedger
from core.models import DayDescriptor
from schemas.records import NurseRecord
from utils.constants import NEVER_WORKED_BONUS, PRIORITY_WEIGHTS


def calculate_priority_score(
    ledger: NurseStatsLedger, nurse: NurseRecord, day: DayDescriptor
) -> float:
    """
    Priority score of a nurse for a shift on `day`. Lower is better.

    Nurses below the staff average on hours, nights and weekends are pulled
    forward, as are nurses who have rested longer. A running streak of
    consecutive days pushes a nurse back.
    """
    stats = ledger.get(nurse.id)
    score = 0.0

    score += (stats.total_hours - ledger.mean_of("total_hours")) * PRIORITY_WEIGHTS["hours"]
    score += (
        stats.night_shift_count - ledger.mean_of("night_shift_count")
    ) * PRIORITY_WEIGHTS["nights"]
    score += (
        stats.weekend_shift_count - ledger.mean_of("weekend_shift_count")
    ) * PRIORITY_WEIGHTS["weekends"]

    if stats.last_worked_date is not None:
        days_since = (day.date - stats.last_worked_date).days
        score -= days_since * PRIORITY_WEIGHTS["days_since_last"]
    else:
        score -= NEVER_WORKED_BONUS

    score += stats.consecutive_days * PRIORITY_WEIGHTS["consecutive"]
    return score


def select_nurses_by_priority(
    ledger: NurseStatsLedger,
    nurses: List[NurseRecord],
    day: DayDescriptor,
    count: int,
) -> List[NurseRecord]:
    """Pick the `count` best-scored nurses; ties keep pool order."""
    scored = [(calculate_priority_score(ledger, n, day), n) for n in nurses]
    scored.sort(key=lambda pair: pair[0])
    return [n for _, n in scored[:count]]
