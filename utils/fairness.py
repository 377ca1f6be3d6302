import math
import statistics
from typing import Sequence

from core.models import FairnessScore
from utils.constants import FAIRNESS_STD_MULTIPLIERS, FAIRNESS_WEIGHTS


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    return statistics.mean(values) if values else 0.0


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation, 0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    return statistics.pstdev(values)


def round_half_up(value: float) -> float:
    """Round to 2 decimals with halves going up (0.125 -> 0.13)."""
    return math.floor(value * 100 + 0.5) / 100


def calculate_fairness_score(
    hours: Sequence[float], nights: Sequence[float], weekends: Sequence[float]
) -> FairnessScore:
    """
    Convert the spread of hours, nights and weekends into a 0-100 score.

    Each component loses points in proportion to its standard deviation and
    is floored at 0. The overall score is their weighted sum.
    """
    hours_std = standard_deviation(hours)
    nights_std = standard_deviation(nights)
    weekends_std = standard_deviation(weekends)

    hours_score = max(0.0, 100 - hours_std * FAIRNESS_STD_MULTIPLIERS["hours"])
    nights_score = max(0.0, 100 - nights_std * FAIRNESS_STD_MULTIPLIERS["nights"])
    weekends_score = max(0.0, 100 - weekends_std * FAIRNESS_STD_MULTIPLIERS["weekends"])

    overall = (
        hours_score * FAIRNESS_WEIGHTS["hours"]
        + nights_score * FAIRNESS_WEIGHTS["nights"]
        + weekends_score * FAIRNESS_WEIGHTS["weekends"]
    )

    return FairnessScore(
        overall=round_half_up(overall),
        hours_score=round_half_up(hours_score),
        nights_score=round_half_up(nights_score),
        weekends_score=round_half_up(weekends_score),
        hours_std_dev=round_half_up(hours_std),
        nights_std_dev=round_half_up(nights_std),
        weekends_std_dev=round_half_up(weekends_std),
    )
