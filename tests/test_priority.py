import unittest
from datetime import date

from core.ledger import NurseStatsLedger
from core.models import DayDescriptor
from scheduler.priority import calculate_priority_score, select_nurses_by_priority
from tests.factories import make_staff


class TestPriority(unittest.TestCase):
    def setUp(self):
        self.staff = make_staff(3)
        self.ledger = NurseStatsLedger(self.staff)
        self.day = DayDescriptor(date=date(2025, 3, 4))

    def test_never_worked_bonus(self):
        self.assertEqual(calculate_priority_score(self.ledger, self.staff[0], self.day), -50)

    def test_score_terms(self):
        self.ledger.record("s1", 8, False, False, date(2025, 3, 3))
        # mean hours = 8 / 3
        expected = (8 - 8 / 3) * 10 - 1 * 2 + 1 * 5
        self.assertAlmostEqual(
            calculate_priority_score(self.ledger, self.staff[0], self.day), expected
        )
        self.assertAlmostEqual(
            calculate_priority_score(self.ledger, self.staff[1], self.day),
            (0 - 8 / 3) * 10 - 50,
        )

    def test_ties_keep_pool_order(self):
        selected = select_nurses_by_priority(self.ledger, self.staff, self.day, 2)
        self.assertEqual([n.id for n in selected], ["s1", "s2"])

    def test_busier_nurse_is_picked_last(self):
        self.ledger.record("s1", 16, True, False, date(2025, 3, 2))
        selected = select_nurses_by_priority(self.ledger, self.staff, self.day, 2)
        self.assertEqual([n.id for n in selected], ["s2", "s3"])

    def test_count_larger_than_pool(self):
        selected = select_nurses_by_priority(self.ledger, self.staff[:1], self.day, 2)
        self.assertEqual(len(selected), 1)


if __name__ == "__main__":
    unittest.main()
