import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Shift types
DAY_SHIFT = "day_8h"
NIGHT_SHIFT = "night_16h"
WEEKEND_SHIFT = "weekend_24h"
SHIFT_TYPES = (DAY_SHIFT, NIGHT_SHIFT, WEEKEND_SHIFT)

# Nurse roles and leave types
RESPONSIBLE_ROLE = "responsible"
STAFF_ROLE = "staff"
PREFERENCE_LEAVE = "preference"

# Expose constants as variables
SHIFT_HOURS = _constants["SHIFT_HOURS"]
SHIFT_TIMES = {k: tuple(v) for k, v in _constants["SHIFT_TIMES"].items()}
STAFF_PER_SHIFT = _constants["STAFF_PER_SHIFT"]
MIN_STAFF_NURSES = _constants["MIN_STAFF_NURSES"]

MAX_CONSECUTIVE_DAYS = _constants["MAX_CONSECUTIVE_DAYS"]
MAX_NIGHT_SHIFTS = _constants["MAX_NIGHT_SHIFTS"]
MAX_WEEKEND_SHIFTS = _constants["MAX_WEEKEND_SHIFTS"]

PRIORITY_WEIGHTS = _constants["PRIORITY_WEIGHTS"]
NEVER_WORKED_BONUS = _constants["NEVER_WORKED_BONUS"]

FAIRNESS_STD_MULTIPLIERS = _constants["FAIRNESS_STD_MULTIPLIERS"]
FAIRNESS_WEIGHTS = _constants["FAIRNESS_WEIGHTS"]

RESPONSIBLE_LEAVE_WARNING_DAYS = _constants["RESPONSIBLE_LEAVE_WARNING_DAYS"]
LOW_HOURS_WARNING_RATIO = _constants["LOW_HOURS_WARNING_RATIO"]

WEEKEND_PRESETS = {k: frozenset(v) for k, v in _constants["WEEKEND_PRESETS"].items()}
DEFAULT_WEEKEND = _constants["DEFAULT_WEEKEND"]
