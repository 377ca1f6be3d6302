from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List

from exceptions.custom_errors import InvalidMonthError
from utils.date_utils import parse_month


class GenerateScheduleRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    month: str = Field(..., description="Month to schedule, YYYY-MM", examples=["2025-03"])

    @field_validator("month")
    @classmethod
    def check_month(cls, value: str) -> str:
        """Reject anything that is not a real YYYY-MM month."""
        try:
            parse_month(value)
        except InvalidMonthError as e:
            raise ValueError(str(e))
        return value.strip()


class FairnessScoreOut(BaseModel):
    overall: float
    hours_score: float
    nights_score: float
    weekends_score: float
    hours_std_dev: float
    nights_std_dev: float
    weekends_std_dev: float


class GenerateScheduleResponse(BaseModel):
    id: str
    month: str
    status: str
    fairness_score: FairnessScoreOut
    shifts: int
    assignments: int
    incomplete_shifts: int
    warnings: List[str]
    generation_time_ms: float
