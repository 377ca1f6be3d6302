schedule_roster_description = """
Generate the roster of one month from the nurses and leaves currently stored.

### Request Body

- `month`: Month to schedule, in `YYYY-MM` form.

### Rules applied

- Weekdays get an 8h day shift (08:00-16:00, 2 staff + the responsible nurse)
  and a 16h night shift (16:00-08:00, 2 staff).
- Weekend days (Saturday and Sunday by default, see `WEEKEND_CONFIG`) get a
  single 24h shift with 2 staff.
- A nurse works at most one shift per day and at most 5 days in a row.
- After a night or 24h shift a nurse rests the following day.
- A 24h weekend shift needs a free day before it.
- At most 10 nights and 4 weekend shifts per staff nurse per month.
- Annual, excuse and sick leave block assignment; preference leave does not.
- The responsible nurse only works day shifts.

Among eligible nurses, those with fewer hours, nights and weekends than the
staff average, and those who rested longer, are picked first.

### Response

- `id`, `month`, `status`: The created schedule.
- `fairness_score`: `overall` (0-100) with the hours/nights/weekends
  component scores and the standard deviations they were derived from.
- `shifts`, `assignments`: Number of shifts and assignments created.
- `incomplete_shifts`: Shifts that could not be fully staffed.
- `warnings`: Advisory messages about coverage risk or workload imbalance.
- `generation_time_ms`: Time spent generating the roster.

The API endpoint raises an HTTPException with a status code of 409 if a
schedule already exists for the month and 422 if there is no responsible
nurse or fewer than 2 staff nurses.
"""
