import unittest
from datetime import date

from core.models import Assignment, DayDescriptor, ShiftDemand
from core.state import ScheduleState
from scheduler.extractor import (
    build_monthly_stats,
    generate_warnings,
    monthly_statistics,
    responsible_leave_days,
    summarize_coverage,
    validate_schedule,
)
from scheduler.month_calendar import build_month_days
from tests.factories import make_leave, make_nurse, make_staff


def shift(shift_id, shift_type, on_date, requires_responsible=False):
    return ShiftDemand(
        date=on_date,
        shift_type=shift_type,
        start_time="08:00",
        end_time="16:00",
        required_staff_count=2,
        requires_responsible=requires_responsible,
        id=shift_id,
    )


class TestCoverage(unittest.TestCase):
    def setUp(self):
        self.day = shift("d1", "day_8h", date(2025, 3, 3), requires_responsible=True)
        self.night = shift("n1", "night_16h", date(2025, 3, 3))

    def test_day_shift_without_responsible_is_incomplete(self):
        assignments = [Assignment("d1", "s1"), Assignment("d1", "s2")]
        day_cov, night_cov = summarize_coverage([self.day, self.night], assignments)

        self.assertFalse(day_cov.is_complete)
        self.assertEqual(day_cov.current_staff, 2)
        self.assertEqual(day_cov.status_message, "responsible nurse required")
        self.assertEqual(night_cov.status_message, "2 staff nurse(s) missing")

    def test_complete_shifts(self):
        assignments = [
            Assignment("d1", "r1", role="responsible"),
            Assignment("d1", "s1"),
            Assignment("d1", "s2"),
            Assignment("n1", "s3"),
            Assignment("n1", "s4"),
        ]
        coverage = summarize_coverage([self.day, self.night], assignments)
        self.assertTrue(all(c.is_complete for c in coverage))
        self.assertEqual(coverage[0].current_responsible, 1)
        self.assertEqual(coverage[0].status_message, "Complete")

        report = validate_schedule(coverage)
        self.assertTrue(report["is_valid"])
        self.assertEqual(report["complete_shifts"], 2)
        self.assertEqual(report["issues"], [])

    def test_validate_lists_issues(self):
        coverage = summarize_coverage([self.day, self.night], [Assignment("n1", "s3")])
        report = validate_schedule(coverage)
        self.assertFalse(report["is_valid"])
        self.assertEqual(report["incomplete_shifts"], 2)
        self.assertEqual(report["issues"][1], "2025-03-03 - night_16h: 1 staff nurse(s) missing")
        self.assertEqual(
            report["issues"][0],
            "2025-03-03 - day_8h: 2 staff nurse(s) missing, responsible nurse required",
        )


class TestWarnings(unittest.TestCase):
    def make_state(self, leaves=()):
        state = ScheduleState(schedule_id="sched-1", month="2025-03")
        state.responsible = make_nurse("r1", role="responsible", name="Ayse")
        state.staff = make_staff(3)
        state.leaves = list(leaves)
        state.index_leaves()
        state.days = build_month_days(2025, 2, weekend_days={5, 6})
        state.ledger.initialize(state.staff)
        return state

    def test_no_warnings_for_an_even_month(self):
        state = self.make_state()
        for nurse in state.staff:
            state.ledger.record(nurse.id, 8, False, False, date(2025, 3, 3))
        self.assertEqual(generate_warnings(state), [])

    def test_responsible_leave_counts_days_inside_the_month(self):
        state = self.make_state(
            leaves=[
                make_leave("r1", date(2025, 2, 20), date(2025, 3, 5)),
                make_leave("r1", date(2025, 3, 20), date(2025, 3, 25)),
                make_leave("r1", date(2025, 3, 26), date(2025, 3, 28), leave_type="preference"),
            ]
        )
        self.assertEqual(responsible_leave_days(state), 11)
        warnings = generate_warnings(state)
        self.assertEqual(
            warnings[0],
            "Responsible nurse Ayse is on leave 11 days this month - "
            "some day shifts may be missing the responsible nurse",
        )

    def test_ten_leave_days_do_not_warn(self):
        state = self.make_state(leaves=[make_leave("r1", date(2025, 3, 1), date(2025, 3, 10))])
        self.assertEqual(generate_warnings(state), [])

    def test_low_hours_warning(self):
        state = self.make_state()
        state.ledger.record("s1", 24, True, True, date(2025, 3, 1))
        state.ledger.record("s2", 24, True, True, date(2025, 3, 1))
        state.ledger.record("s3", 8, False, False, date(2025, 3, 3))
        self.assertEqual(
            generate_warnings(state), ["Nurse s3: far fewer shifts than colleagues (8 hours)"]
        )


class TestMonthlyStats(unittest.TestCase):
    def setUp(self):
        self.nurses = [
            make_nurse("s2", name="Zeynep"),
            make_nurse("r1", role="responsible", name="Ayse"),
            make_nurse("s1", name="Burak"),
        ]
        self.shifts = [
            shift("d1", "day_8h", date(2025, 3, 3), requires_responsible=True),
            shift("n1", "night_16h", date(2025, 3, 3)),
            shift("w1", "weekend_24h", date(2025, 3, 1)),
        ]
        self.assignments = [
            Assignment("d1", "r1", role="responsible"),
            Assignment("d1", "s1"),
            Assignment("n1", "s2"),
            Assignment("w1", "s1"),
        ]

    def test_rows_per_nurse(self):
        df = build_monthly_stats(self.nurses, self.shifts, self.assignments)
        self.assertEqual(df["nurse_name"].tolist(), ["Ayse", "Burak", "Zeynep"])

        burak = df[df["nurse_id"] == "s1"].iloc[0]
        self.assertEqual(burak["total_hours"], 32)
        self.assertEqual(burak["shift_count"], 2)
        self.assertEqual(burak["day_shift_count"], 1)
        self.assertEqual(burak["night_shift_count"], 1)
        self.assertEqual(burak["weekend_shift_count"], 1)

        ayse = df[df["nurse_id"] == "r1"].iloc[0]
        self.assertEqual(ayse["total_hours"], 8)

    def test_nurse_without_assignments(self):
        nurses = self.nurses + [make_nurse("s3", name="Can")]
        df = build_monthly_stats(nurses, self.shifts, self.assignments)
        can = df[df["nurse_id"] == "s3"].iloc[0]
        self.assertEqual(can["total_hours"], 0)
        self.assertEqual(can["shift_count"], 0)

    def test_empty_schedule(self):
        df = build_monthly_stats(self.nurses, [], [])
        self.assertEqual(len(df), 3)
        self.assertEqual(df["total_hours"].sum(), 0)

    def test_staff_averages(self):
        stats = monthly_statistics(self.nurses, self.shifts, self.assignments)
        self.assertEqual(stats["averages"]["staff_avg_hours"], 24.0)
        self.assertEqual(stats["averages"]["staff_avg_nights"], 1.0)
        self.assertEqual(stats["averages"]["staff_avg_weekends"], 0.5)
        self.assertEqual(stats["fairness_score"]["hours_std_dev"], 8.0)
        self.assertEqual(len(stats["nurses"]), 3)


if __name__ == "__main__":
    unittest.main()
