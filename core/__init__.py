"""
core
----

Core scheduling engine components:

- HardRule & define_hard_rules:
  Named eligibility checks a nurse must pass to be a candidate for a shift.

- ConstraintManager:
  Register hard rules for one shift type and narrow the staff pool with them.

- NurseStatsLedger:
  Per-nurse running totals (hours, nights, weekends, streaks) for one run.

- ScheduleState:
  Encapsulate all inputs and intermediate collections of a scheduling run.
"""
