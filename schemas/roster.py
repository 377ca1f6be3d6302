from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import date

from schemas.records import LeaveType, NurseRole


class CreateNurseRequest(BaseModel):
    name: str = Field(..., min_length=1)
    role: NurseRole = "staff"


class CreateLeaveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nurse_id: str
    leave_type: LeaveType = Field(default="annual", alias="type")
    start_date: date
    end_date: date
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self) -> "CreateLeaveRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date.")
        return self
