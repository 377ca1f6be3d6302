import pandas as pd
from dataclasses import asdict
from typing import Dict, Iterable, List

from core.models import Assignment, FairnessScore, ShiftCoverage, ShiftDemand
from core.state import ScheduleState
from schemas.records import NurseRecord
from utils.constants import (
    DAY_SHIFT,
    LOW_HOURS_WARNING_RATIO,
    NIGHT_SHIFT,
    RESPONSIBLE_LEAVE_WARNING_DAYS,
    RESPONSIBLE_ROLE,
    SHIFT_HOURS,
    STAFF_ROLE,
    WEEKEND_SHIFT,
)
from utils.fairness import calculate_fairness_score, mean, round_half_up
from utils.logger import get_logger

logger = get_logger(__name__)

STATS_COLUMNS = [
    "nurse_id",
    "nurse_name",
    "nurse_role",
    "total_hours",
    "shift_count",
    "day_shift_count",
    "night_shift_count",
    "weekend_shift_count",
]


def calculate_final_fairness_score(state: ScheduleState) -> FairnessScore:
    """Fairness over the final ledger totals of the staff nurses."""
    stats = state.ledger.all()
    score = calculate_fairness_score(
        hours=[s.total_hours for s in stats],
        nights=[s.night_shift_count for s in stats],
        weekends=[s.weekend_shift_count for s in stats],
    )
    logger.info("Fairness metrics:")
    logger.info("  Hours std dev:    %.2f", score.hours_std_dev)
    logger.info("  Nights std dev:   %.2f", score.nights_std_dev)
    logger.info("  Weekends std dev: %.2f", score.weekends_std_dev)
    logger.info("  Overall score:    %.2f", score.overall)
    return score


def responsible_leave_days(state: ScheduleState) -> int:
    """Distinct days of the month the responsible nurse is on blocking leave."""
    if state.responsible is None:
        return 0
    return sum(1 for day in state.days if state.is_on_leave(state.responsible.id, day.date))


def generate_warnings(state: ScheduleState) -> List[str]:
    """Advisory messages about coverage risk and workload imbalance."""
    warnings = []

    leave_days = responsible_leave_days(state)
    if leave_days > RESPONSIBLE_LEAVE_WARNING_DAYS:
        warnings.append(
            f"Responsible nurse {state.responsible.name} is on leave {leave_days} days "
            f"this month - some day shifts may be missing the responsible nurse"
        )

    stats = state.ledger.all()
    avg_hours = mean([s.total_hours for s in stats])
    for s in stats:
        if s.total_hours < avg_hours * LOW_HOURS_WARNING_RATIO:
            warnings.append(
                f"{s.nurse.name}: far fewer shifts than colleagues ({s.total_hours} hours)"
            )
    return warnings


# == Coverage ==
def summarize_coverage(
    shifts: Iterable[ShiftDemand], assignments: Iterable[Assignment]
) -> List[ShiftCoverage]:
    """Staffing level of each shift compared with what it requires."""
    by_shift: Dict[str, List[Assignment]] = {}
    for a in assignments:
        by_shift.setdefault(a.shift_id, []).append(a)

    coverage = []
    for shift in shifts:
        assigned = by_shift.get(shift.id, [])
        staff = sum(1 for a in assigned if a.role == STAFF_ROLE)
        responsible = sum(1 for a in assigned if a.role == RESPONSIBLE_ROLE)
        missing = max(0, shift.required_staff_count - staff)
        needs_responsible = shift.requires_responsible and responsible == 0

        if missing == 0 and not needs_responsible:
            message = "Complete"
        else:
            parts = []
            if missing:
                parts.append(f"{missing} staff nurse(s) missing")
            if needs_responsible:
                parts.append("responsible nurse required")
            message = ", ".join(parts)

        coverage.append(
            ShiftCoverage(
                shift=shift,
                current_staff=staff,
                current_responsible=responsible,
                is_complete=missing == 0 and not needs_responsible,
                status_message=message,
            )
        )
    return coverage


def validate_schedule(coverage: List[ShiftCoverage]) -> dict:
    """Totals of complete and incomplete shifts, with one issue line per incomplete shift."""
    issues = [
        f"{c.shift.date.isoformat()} - {c.shift.shift_type}: {c.status_message}"
        for c in coverage
        if not c.is_complete
    ]
    incomplete = len(issues)
    return {
        "is_valid": incomplete == 0,
        "total_shifts": len(coverage),
        "complete_shifts": len(coverage) - incomplete,
        "incomplete_shifts": incomplete,
        "issues": issues,
    }


# == Monthly statistics ==
def build_monthly_stats(
    nurses: Iterable[NurseRecord],
    shifts: Iterable[ShiftDemand],
    assignments: Iterable[Assignment],
) -> pd.DataFrame:
    """
    One row per nurse with worked hours and shift counts for a schedule.

    Night counts include 24h weekend shifts. Responsible nurses are listed
    first, then everyone by name.
    """
    nurse_df = pd.DataFrame(
        [{"nurse_id": n.id, "nurse_name": n.name, "nurse_role": n.role} for n in nurses],
        columns=["nurse_id", "nurse_name", "nurse_role"],
    )
    shift_df = pd.DataFrame(
        [{"shift_id": s.id, "shift_type": s.shift_type} for s in shifts],
        columns=["shift_id", "shift_type"],
    )
    asg_df = pd.DataFrame(
        [{"shift_id": a.shift_id, "nurse_id": a.nurse_id} for a in assignments],
        columns=["shift_id", "nurse_id"],
    )

    merged = asg_df.merge(shift_df, on="shift_id", how="inner")
    count_cols = STATS_COLUMNS[3:]

    if merged.empty:
        out = nurse_df.copy()
        for col in count_cols:
            out[col] = 0
    else:
        merged["hours"] = merged["shift_type"].map(SHIFT_HOURS).fillna(0)
        merged["is_day"] = merged["shift_type"] == DAY_SHIFT
        merged["is_night"] = merged["shift_type"].isin([NIGHT_SHIFT, WEEKEND_SHIFT])
        merged["is_weekend"] = merged["shift_type"] == WEEKEND_SHIFT

        totals = merged.groupby("nurse_id").agg(
            total_hours=("hours", "sum"),
            shift_count=("shift_id", "count"),
            day_shift_count=("is_day", "sum"),
            night_shift_count=("is_night", "sum"),
            weekend_shift_count=("is_weekend", "sum"),
        )
        out = nurse_df.merge(totals, left_on="nurse_id", right_index=True, how="left")
        out[count_cols] = out[count_cols].fillna(0)

    out[count_cols] = out[count_cols].astype(int)
    out = out.sort_values(["nurse_role", "nurse_name"]).reset_index(drop=True)
    return out[STATS_COLUMNS]


def monthly_statistics(
    nurses: Iterable[NurseRecord],
    shifts: Iterable[ShiftDemand],
    assignments: Iterable[Assignment],
) -> dict:
    """Per-nurse statistics plus staff averages and the staff fairness score."""
    stats_df = build_monthly_stats(nurses, shifts, assignments)
    staff_df = stats_df[stats_df["nurse_role"] == STAFF_ROLE]

    score = calculate_fairness_score(
        hours=staff_df["total_hours"].tolist(),
        nights=staff_df["night_shift_count"].tolist(),
        weekends=staff_df["weekend_shift_count"].tolist(),
    )
    averages = {
        "staff_avg_hours": round_half_up(mean(staff_df["total_hours"].tolist())),
        "staff_avg_nights": round_half_up(mean(staff_df["night_shift_count"].tolist())),
        "staff_avg_weekends": round_half_up(mean(staff_df["weekend_shift_count"].tolist())),
    }
    return {
        "fairness_score": asdict(score),
        "nurses": stats_df.to_dict(orient="records"),
        "averages": averages,
    }
