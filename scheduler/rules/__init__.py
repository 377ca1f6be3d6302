"""
scheduler.rules
---------------

Eligibility rules per shift type:

- Day shifts: leave, same-day booking, consecutive-day limit, rest after a night.
- Night shifts: day-shift rules, no night right after any shift once a nurse has had a
  night this month, and the monthly night cap.
- Weekend 24h shifts: leave, a rest day before the shift, the monthly weekend cap.
"""
from .eligibility import *
