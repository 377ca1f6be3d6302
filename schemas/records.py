from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
from datetime import date

NurseRole = Literal["responsible", "staff"]
LeaveType = Literal["annual", "excuse", "sick", "preference"]
ScheduleStatus = Literal["draft", "published"]


class NurseRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    name: str
    role: NurseRole


class LeaveRecord(BaseModel):
    """
    A leave declared by a nurse.

    `leave_type` is read from the `type` key, matching the records the store
    returns. Records with a missing `start_date` or `end_date` are kept as
    they are; the engine treats them as non-blocking.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: Optional[str] = None
    nurse_id: str
    leave_type: LeaveType = Field(default="annual", alias="type")
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    notes: Optional[str] = None

    @property
    def blocks_assignment(self) -> bool:
        return self.leave_type != "preference"

    @property
    def has_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    def covers(self, on_date: date) -> bool:
        """True when this leave makes the nurse unavailable on `on_date`."""
        if not self.blocks_assignment or not self.has_range:
            return False
        return self.start_date <= on_date <= self.end_date


class ScheduleRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    month: str
    status: ScheduleStatus = "draft"
    fairness_score: Optional[float] = None
