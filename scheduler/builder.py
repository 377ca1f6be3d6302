import time
from typing import Iterable, List, Optional

from core.models import Assignment, FairnessScore, GenerationResult, ShiftDemand
from core.state import RunPhase, ScheduleState
from scheduler.demand import group_shifts_by_date, plan_shift_demands
from scheduler.executor import AssignmentExecutor
from scheduler.extractor import (
    calculate_final_fairness_score,
    generate_warnings,
    summarize_coverage,
)
from scheduler.month_calendar import HolidayPredicate, build_month_days
from store.base import RosterStore
from utils.date_utils import parse_month
from utils.logger import get_logger
from utils.validate import validate_nurse_pool

logger = get_logger(__name__)


class SchedulerService:
    """
    Generate the shifts and nurse assignments of one month.

    A service instance runs one schedule at a time; create a new instance per
    run. Runs for different months share nothing. Two runs for the same month
    must be serialized by the caller.
    """

    def __init__(
        self,
        store: RosterStore,
        weekend_days: Optional[Iterable[int]] = None,
        is_holiday: Optional[HolidayPredicate] = None,
    ):
        self.store = store
        self.weekend_days = weekend_days
        self.is_holiday = is_holiday
        self.state: Optional[ScheduleState] = None

    @property
    def phase(self) -> RunPhase:
        return self.state.phase if self.state else RunPhase.UNINITIALIZED

    async def generate(self, schedule_id: str, month: str) -> GenerationResult:
        """
        Main entry point: generate the schedule of `month` (YYYY-MM).

        Raises:
            InvalidMonthError: If `month` is malformed.
            SchedulePreconditionError: If there is no responsible nurse or too
                few staff nurses. No shift is created in that case.
        """
        logger.info("Starting schedule generation for %s", month)
        started = time.perf_counter()
        self.state = ScheduleState(schedule_id=schedule_id, month=month)

        try:
            # Phase 1: Initialization
            await self.initialize()

            # Phase 2: Create shifts
            shifts = await self.create_shifts()

            # Phase 3: Assign nurses to shifts
            assignments = await self.assign_nurses_to_shifts(shifts)

            # Phase 4: Score
            fairness = self.score()
            await self.store.update_schedule_fairness_score(schedule_id, fairness.overall)
        except Exception as e:
            self.state.advance(RunPhase.FAILED)
            logger.error("❌ Schedule generation failed for %s: %s", month, e)
            raise

        coverage = summarize_coverage(shifts, assignments)
        result = GenerationResult(
            schedule_id=schedule_id,
            month=month,
            fairness_score=fairness,
            shift_count=len(shifts),
            assignment_count=len(assignments),
            incomplete_shift_count=sum(1 for c in coverage if not c.is_complete),
            warnings=generate_warnings(self.state),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        self.state.advance(RunPhase.DONE)

        logger.info("✅ Schedule generated in %.2f ms", result.elapsed_ms)
        logger.info("Fairness score: %.2f", fairness.overall)
        return result

    async def initialize(self) -> None:
        """Load nurses and leaves, check preconditions and build the month calendar."""
        logger.info("📋 Phase 1: Initialization")
        state = self.state
        year, month_index = parse_month(state.month)

        state.responsible = await self.store.find_responsible_nurse()
        state.staff = list(await self.store.find_staff_nurses())
        validate_nurse_pool(state.responsible, state.staff)
        logger.info("Found 1 responsible + %d staff nurses", len(state.staff))

        state.leaves = list(await self.store.find_leaves(state.month))
        state.index_leaves()
        logger.info("Found %d leaves", len(state.leaves))

        state.days = build_month_days(
            year, month_index, weekend_days=self.weekend_days, is_holiday=self.is_holiday
        )
        logger.info("Processing %d days", len(state.days))

        state.ledger.initialize(state.staff)
        state.advance(RunPhase.INITIALIZED)

    async def create_shifts(self) -> List[ShiftDemand]:
        logger.info("🚀 Phase 2: Creating shifts")
        demands = plan_shift_demands(self.state.days, schedule_id=self.state.schedule_id)
        self.state.shifts = list(await self.store.bulk_create_shifts(demands))
        logger.info("Created %d shifts", len(self.state.shifts))
        self.state.advance(RunPhase.SHIFTS_CREATED)
        return self.state.shifts

    async def assign_nurses_to_shifts(self, shifts: List[ShiftDemand]) -> List[Assignment]:
        logger.info("🚀 Phase 3: Assigning nurses to shifts")
        executor = AssignmentExecutor(self.state)
        self.state.assignments = executor.run(group_shifts_by_date(shifts))
        await self.store.bulk_create_assignments(self.state.assignments)
        logger.info("Created %d assignments", len(self.state.assignments))
        self.state.advance(RunPhase.ASSIGNED)
        return self.state.assignments

    def score(self) -> FairnessScore:
        logger.info("🚀 Phase 4: Calculating fairness score")
        fairness = calculate_final_fairness_score(self.state)
        self.state.advance(RunPhase.SCORED)
        return fairness
