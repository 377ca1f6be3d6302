"""
utils package
-------------

Shared helpers of the scheduler:

- `constants`: values loaded from config/constants.json.
- `date_utils`: month parsing, date ranges and weekend presets.
- `fairness`: workload spread and the fairness score.
- `validate`: nurse pool preconditions.
- `logger`: the `schedule` logger.
"""
