import unittest
from collections import defaultdict
from datetime import date, timedelta

from core.state import RunPhase
from exceptions.custom_errors import InsufficientStaffError, MissingResponsibleNurseError
from scheduler import SchedulerService
from tests.factories import RecordingStore, make_leave, make_nurse, make_staff

WEEKEND = {5, 6}


def make_store(staff_count=10, leaves=(), responsible=True):
    return RecordingStore(
        responsible=make_nurse("r1", role="responsible", name="Ayse") if responsible else None,
        staff=make_staff(staff_count),
        leaves=list(leaves),
    )


def worked_dates(store):
    """nurse id -> list of (date, shift type) in shift order."""
    shifts = {s.id: s for s in store.shifts}
    worked = defaultdict(list)
    for a in store.assignments:
        s = shifts[a.shift_id]
        worked[a.nurse_id].append((s.date, s.shift_type))
    return worked


class TestSchedulerService(unittest.IsolatedAsyncioTestCase):
    async def generate(self, store, month="2025-03", weekend_days=WEEKEND):
        service = SchedulerService(store, weekend_days=weekend_days)
        result = await service.generate("sched-1", month)
        return service, result

    async def test_full_month_run(self):
        store = make_store()
        service, result = await self.generate(store)

        self.assertEqual(service.phase, RunPhase.DONE)
        self.assertEqual(result.shift_count, 52)
        self.assertEqual(result.incomplete_shift_count, 0)
        # 21 day shifts x (2 staff + responsible) + 21 nights x 2 + 10 weekends x 2
        self.assertEqual(result.assignment_count, 21 * 3 + 21 * 2 + 10 * 2)
        self.assertEqual(store.bulk_create_shifts_calls, 1)
        self.assertEqual(store.bulk_create_assignments_calls, 1)
        self.assertEqual(store.fairness_updates, [("sched-1", result.fairness_score.overall)])
        self.assertTrue(all(a.source == "algorithm" for a in store.assignments))

    async def test_no_weekend_days_gives_62_shifts(self):
        store = make_store()
        _, result = await self.generate(store, weekend_days=set())
        self.assertEqual(result.shift_count, 62)

    async def test_nobody_is_double_booked(self):
        store = make_store()
        await self.generate(store)
        for nurse_id, worked in worked_dates(store).items():
            dates = [d for d, _ in worked]
            self.assertEqual(len(dates), len(set(dates)), nurse_id)

    async def test_consecutive_days_never_exceed_five(self):
        store = make_store()
        await self.generate(store)
        for nurse_id, worked in worked_dates(store).items():
            if nurse_id == "r1":
                continue
            dates = sorted(d for d, _ in worked)
            streak = 1
            for prev, cur in zip(dates, dates[1:]):
                streak = streak + 1 if cur - prev == timedelta(days=1) else 1
                self.assertLessEqual(streak, 5, nurse_id)

    async def test_rest_after_night_and_24h_shifts(self):
        store = make_store()
        await self.generate(store)
        for nurse_id, worked in worked_dates(store).items():
            dates = {d for d, _ in worked}
            for d, shift_type in worked:
                if shift_type in ("night_16h", "weekend_24h"):
                    self.assertNotIn(d + timedelta(days=1), dates, nurse_id)

    async def test_no_night_the_day_after_any_shift_once_nights_were_worked(self):
        store = make_store()
        await self.generate(store)
        for nurse_id, worked in worked_dates(store).items():
            dates = {d for d, _ in worked}
            for d, shift_type in worked:
                if shift_type != "night_16h" or d - timedelta(days=1) not in dates:
                    continue
                earlier_nights = [
                    w for w, t in worked if w < d and t in ("night_16h", "weekend_24h")
                ]
                self.assertEqual(earlier_nights, [], (nurse_id, d))

    async def test_responsible_nurse_only_works_day_shifts(self):
        store = make_store()
        await self.generate(store)
        worked = worked_dates(store)["r1"]
        self.assertEqual({t for _, t in worked}, {"day_8h"})
        self.assertEqual(len(worked), 21)
        responsible = [a for a in store.assignments if a.nurse_id == "r1"]
        self.assertTrue(all(a.role == "responsible" for a in responsible))

    async def test_leave_days_are_not_assigned(self):
        leave = make_leave("s1", date(2025, 3, 10), date(2025, 3, 11))
        store = make_store(leaves=[leave])
        service, _ = await self.generate(store)

        self.assertEqual(service.phase, RunPhase.DONE)
        dates = {d for d, _ in worked_dates(store)["s1"]}
        self.assertNotIn(date(2025, 3, 10), dates)
        self.assertNotIn(date(2025, 3, 11), dates)

    async def test_responsible_on_leave_leaves_day_shifts_incomplete(self):
        leave = make_leave("r1", date(2025, 3, 3), date(2025, 3, 16))
        store = make_store(leaves=[leave])
        _, result = await self.generate(store)

        # weekdays 3-7 and 10-14
        self.assertEqual(result.incomplete_shift_count, 10)
        self.assertTrue(result.warnings[0].startswith("Responsible nurse Ayse is on leave 14 days"))

    async def test_runs_are_deterministic(self):
        first_store, second_store = make_store(), make_store()
        _, first = await self.generate(first_store)
        _, second = await self.generate(second_store)

        self.assertEqual(first.fairness_score, second.fairness_score)
        self.assertEqual(
            [(a.shift_id, a.nurse_id) for a in first_store.assignments],
            [(a.shift_id, a.nurse_id) for a in second_store.assignments],
        )

    async def test_missing_responsible_nurse_creates_nothing(self):
        store = make_store(responsible=False)
        service = SchedulerService(store, weekend_days=WEEKEND)

        with self.assertRaises(MissingResponsibleNurseError):
            await service.generate("sched-1", "2025-03")

        self.assertEqual(service.phase, RunPhase.FAILED)
        self.assertEqual(store.bulk_create_shifts_calls, 0)
        self.assertEqual(store.fairness_updates, [])

    async def test_too_few_staff_nurses(self):
        store = make_store(staff_count=1)
        with self.assertRaises(InsufficientStaffError):
            await SchedulerService(store, weekend_days=WEEKEND).generate("sched-1", "2025-03")
        self.assertEqual(store.bulk_create_shifts_calls, 0)

    async def test_small_team_is_understaffed_but_completes(self):
        store = make_store(staff_count=4)
        service, result = await self.generate(store)
        self.assertEqual(service.phase, RunPhase.DONE)
        self.assertGreater(result.incomplete_shift_count, 0)
        self.assertLess(result.assignment_count, 21 * 3 + 21 * 2 + 10 * 2)


if __name__ == "__main__":
    unittest.main()
