"""
store
-----

Persistence collaborators of the scheduler:

- `base.RosterStore`: the operations a scheduling run awaits.
- `memory.InMemoryRosterStore`: a process-local implementation used by the API and tests.
"""
from .base import RosterStore
from .memory import InMemoryRosterStore
