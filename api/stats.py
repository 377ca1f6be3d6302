from fastapi import APIRouter, Depends

from api.deps import get_store
from scheduler.extractor import monthly_statistics
from store.memory import InMemoryRosterStore

router = APIRouter(prefix="/stats", tags=["Statistics"])


@router.get("/monthly/{schedule_id}", response_model=dict, summary="Monthly Statistics")
async def monthly_stats(schedule_id: str, store: InMemoryRosterStore = Depends(get_store)):
    """Hours and shift counts per nurse, staff averages and the staff fairness score."""
    schedule = await store.get_schedule(schedule_id)
    stats = monthly_statistics(
        await store.list_nurses(),
        await store.shifts_for(schedule_id),
        await store.assignments_for(schedule_id),
    )
    return {"schedule_id": schedule.id, "month": schedule.month, **stats}
