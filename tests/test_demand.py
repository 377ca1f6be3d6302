import unittest
from datetime import date

from core.models import DayDescriptor
from scheduler.demand import group_shifts_by_date, plan_day, plan_shift_demands
from scheduler.month_calendar import build_month_days


class TestShiftDemandPlanner(unittest.TestCase):
    def test_weekday_gets_day_then_night(self):
        shifts = plan_day(DayDescriptor(date=date(2025, 3, 3)))
        self.assertEqual([s.shift_type for s in shifts], ["day_8h", "night_16h"])

        day, night = shifts
        self.assertTrue(day.requires_responsible)
        self.assertEqual((day.start_time, day.end_time), ("08:00", "16:00"))
        self.assertFalse(night.requires_responsible)
        self.assertEqual((night.start_time, night.end_time), ("16:00", "08:00"))
        self.assertTrue(all(s.required_staff_count == 2 for s in shifts))

    def test_weekend_gets_one_24h_shift(self):
        shifts = plan_day(DayDescriptor(date=date(2025, 3, 1), is_weekend=True))
        self.assertEqual(len(shifts), 1)
        self.assertEqual(shifts[0].shift_type, "weekend_24h")
        self.assertEqual((shifts[0].start_time, shifts[0].end_time), ("00:00", "24:00"))
        self.assertFalse(shifts[0].requires_responsible)

    def test_holiday_is_planned_like_a_weekend(self):
        shifts = plan_day(DayDescriptor(date=date(2025, 3, 12), is_holiday=True))
        self.assertEqual([s.shift_type for s in shifts], ["weekend_24h"])

    def test_month_without_weekends_has_62_shifts(self):
        days = build_month_days(2025, 2, weekend_days=set())
        self.assertEqual(len(plan_shift_demands(days)), 62)

    def test_month_with_default_weekend(self):
        days = build_month_days(2025, 2, weekend_days={5, 6})
        shifts = plan_shift_demands(days, schedule_id="sched-1")
        # 21 weekdays x 2 + 10 weekend days x 1
        self.assertEqual(len(shifts), 52)
        self.assertTrue(all(s.schedule_id == "sched-1" for s in shifts))

    def test_grouping_keeps_day_before_night(self):
        days = build_month_days(2025, 2, weekend_days={5, 6})
        grouped = group_shifts_by_date(plan_shift_demands(days))
        self.assertEqual(list(grouped), [d.date for d in days])
        self.assertEqual(
            [s.shift_type for s in grouped[date(2025, 3, 3)]], ["day_8h", "night_16h"]
        )


if __name__ == "__main__":
    unittest.main()
