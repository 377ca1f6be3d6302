from typing import List, Optional

from fastapi import APIRouter, Depends

from api.deps import get_store
from schemas.records import LeaveRecord
from schemas.roster import CreateLeaveRequest
from store.memory import InMemoryRosterStore

router = APIRouter(prefix="/leaves", tags=["Leaves"])


@router.get("", response_model=List[LeaveRecord], summary="List Leaves")
async def list_leaves(
    month: Optional[str] = None,
    nurse_id: Optional[str] = None,
    store: InMemoryRosterStore = Depends(get_store),
):
    """Leaves overlapping `month` (YYYY-MM) when given, optionally for one nurse."""
    return await store.list_leaves(month=month, nurse_id=nurse_id)


@router.post("", response_model=LeaveRecord, status_code=201, summary="Create Leave")
async def create_leave(
    request: CreateLeaveRequest, store: InMemoryRosterStore = Depends(get_store)
):
    return await store.create_leave(
        nurse_id=request.nurse_id,
        leave_type=request.leave_type,
        start_date=request.start_date,
        end_date=request.end_date,
        notes=request.notes,
    )


@router.delete("/{leave_id}", status_code=204, summary="Delete Leave")
async def delete_leave(leave_id: str, store: InMemoryRosterStore = Depends(get_store)):
    await store.delete_leave(leave_id)
