"""Event service - lists upcoming gym events."""

from gymnastics.domain import Event
from gymnastics.stores.interfaces import EventStore


class EventService:
    """Service for event listing."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events, earliest first."""
        return sorted(self._store.list_events(), key=lambda event: event.date)
