from store.memory import InMemoryRosterStore

_store = InMemoryRosterStore()


def get_store() -> InMemoryRosterStore:
    """Store shared by every route; tests replace it through `app.dependency_overrides`."""
    return _store
