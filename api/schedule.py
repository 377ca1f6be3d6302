from dataclasses import asdict
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_store
from docs.schedule.roster import schedule_roster_description
from exceptions.custom_errors import CUSTOM_ERRORS, ScheduleNotFoundError
from scheduler.builder import SchedulerService
from scheduler.extractor import monthly_statistics, summarize_coverage, validate_schedule
from schemas.records import ScheduleRecord
from schemas.schedule.generate import (
    FairnessScoreOut,
    GenerateScheduleRequest,
    GenerateScheduleResponse,
)
from store.memory import InMemoryRosterStore
from utils.date_utils import parse_month
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/schedule", tags=["Roster"])


# generate roster
@router.post(
    "/generate",
    response_model=GenerateScheduleResponse,
    status_code=201,
    description=schedule_roster_description,
    summary="Generate Roster",
)
async def generate_schedule(
    request: GenerateScheduleRequest,
    store: InMemoryRosterStore = Depends(get_store),
):
    try:
        schedule = await store.create_schedule(request.month)
        try:
            result = await SchedulerService(store).generate(schedule.id, schedule.month)
        except Exception:
            # nothing of a failed run is kept
            await store.delete_schedule(schedule.id, force=True)
            raise

        schedule = await store.get_schedule(schedule.id)
        return GenerateScheduleResponse(
            id=schedule.id,
            month=schedule.month,
            status=schedule.status,
            fairness_score=FairnessScoreOut(**asdict(result.fairness_score)),
            shifts=result.shift_count,
            assignments=result.assignment_count,
            incomplete_shifts=result.incomplete_shift_count,
            warnings=result.warnings,
            generation_time_ms=result.elapsed_ms,
        )

    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        logger.exception("❌ Unexpected error while generating %s", request.month)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("", response_model=List[ScheduleRecord], summary="List Schedules")
async def list_schedules(store: InMemoryRosterStore = Depends(get_store)):
    return await store.list_schedules()


@router.get("/{month}", response_model=dict, summary="Get Schedule")
async def get_schedule(month: str, store: InMemoryRosterStore = Depends(get_store)):
    """Schedule of a month with its shifts grouped by date, coverage and per-nurse statistics."""
    parse_month(month)
    schedule = await store.find_schedule_by_month(month)
    if schedule is None:
        raise ScheduleNotFoundError(f"No schedule for {month}.")

    nurses = await store.list_nurses()
    shifts = await store.shifts_for(schedule.id)
    assignments = await store.assignments_for(schedule.id)
    names = {n.id: n.name for n in nurses}

    by_shift: Dict[str, list] = {}
    for a in assignments:
        by_shift.setdefault(a.shift_id, []).append(
            {
                "nurse_id": a.nurse_id,
                "nurse_name": names.get(a.nurse_id, "UNKNOWN"),
                "role": a.role,
                "source": a.source,
            }
        )

    days: Dict[str, list] = {}
    for c in summarize_coverage(shifts, assignments):
        shift = c.shift
        days.setdefault(shift.date.isoformat(), []).append(
            {
                "id": shift.id,
                "shift_type": shift.shift_type,
                "start_time": shift.start_time,
                "end_time": shift.end_time,
                "required_staff_count": shift.required_staff_count,
                "requires_responsible": shift.requires_responsible,
                "assignments": by_shift.get(shift.id, []),
                "current_staff": c.current_staff,
                "current_responsible": c.current_responsible,
                "is_complete": c.is_complete,
                "status_message": c.status_message,
            }
        )

    return {
        "schedule": schedule.model_dump(),
        "days": [{"date": d, "shifts": s} for d, s in days.items()],
        "stats": monthly_statistics(nurses, shifts, assignments),
    }


@router.post("/{schedule_id}/validate", response_model=dict, summary="Validate Schedule")
async def validate(schedule_id: str, store: InMemoryRosterStore = Depends(get_store)):
    await store.get_schedule(schedule_id)
    coverage = summarize_coverage(
        await store.shifts_for(schedule_id), await store.assignments_for(schedule_id)
    )
    return validate_schedule(coverage)


@router.post("/{schedule_id}/publish", response_model=ScheduleRecord, summary="Publish Schedule")
async def publish(schedule_id: str, store: InMemoryRosterStore = Depends(get_store)):
    schedule = await store.publish_schedule(schedule_id)
    logger.info("Schedule %s (%s) published", schedule.id, schedule.month)
    return schedule


@router.delete("/{schedule_id}", status_code=204, summary="Delete Schedule")
async def delete_schedule(schedule_id: str, store: InMemoryRosterStore = Depends(get_store)):
    await store.delete_schedule(schedule_id)
