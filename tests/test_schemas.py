import unittest

from pydantic import ValidationError

from schemas.roster import CreateLeaveRequest
from schemas.schedule.generate import GenerateScheduleRequest


class TestGenerateScheduleRequest(unittest.TestCase):
    def test_unknown_fields_are_dropped(self):
        request = GenerateScheduleRequest(month=" 2025-03 ", weekendDays=[4, 5])
        self.assertEqual(request.month, "2025-03")
        self.assertFalse(hasattr(request, "weekendDays"))
        self.assertNotIn("weekendDays", request.model_dump())

    def test_invalid_month(self):
        with self.assertRaises(ValidationError):
            GenerateScheduleRequest(month="2025-13")


class TestCreateLeaveRequest(unittest.TestCase):
    def test_type_alias_and_default(self):
        leave = CreateLeaveRequest.model_validate(
            {"nurse_id": "s1", "type": "sick", "start_date": "2025-03-01", "end_date": "2025-03-02"}
        )
        self.assertEqual(leave.leave_type, "sick")
        leave = CreateLeaveRequest.model_validate(
            {"nurse_id": "s1", "start_date": "2025-03-01", "end_date": "2025-03-01"}
        )
        self.assertEqual(leave.leave_type, "annual")

    def test_end_before_start(self):
        with self.assertRaises(ValidationError):
            CreateLeaveRequest.model_validate(
                {"nurse_id": "s1", "start_date": "2025-03-02", "end_date": "2025-03-01"}
            )


if __name__ == "__main__":
    unittest.main()
