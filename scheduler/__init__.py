"""
scheduler
---------

Main scheduling module. Initializes key components:

- `month_calendar`: Expand a month into day descriptors.
- `demand`: Plan the shifts each day requires.
- `rules`: Eligibility filters per shift type.
- `priority`: Fairness-driven priority scoring and selection.
- `executor`: Greedy day-by-day assignment of nurses.
- `extractor`: Fairness, warnings, coverage and monthly statistics.
- `builder`: `SchedulerService`, the entry point of a run.
"""
from . import builder, extractor
from .builder import SchedulerService
