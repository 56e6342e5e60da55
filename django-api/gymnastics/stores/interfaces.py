"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from gymnastics.domain import (
    AppendOutcome,
    Catalog,
    CatalogKind,
    CatalogSummary,
    ClassId,
    Event,
    SessionId,
    Signee,
)


class CatalogStore(ABC):
    """Interface for catalog persistence operations."""

    @abstractmethod
    def get_catalog(self, kind: CatalogKind) -> Catalog | None:
        """Return the singleton catalog of the given kind, or None if not seeded."""
        ...

    @abstractmethod
    def get_catalog_summary(self, kind: CatalogKind) -> CatalogSummary | None:
        """Return the catalog with each session's signees reduced to a count."""
        ...

    @abstractmethod
    def append_signee_if_room_and_unique(
        self, class_id: ClassId, session_id: SessionId, signee: Signee
    ) -> AppendOutcome:
        """Atomically add a signee to a session of the signups catalog.

        The duplicate and capacity checks are evaluated in the same atomic
        unit as the insert, so concurrent callers can never push a session
        past its maximum or register the same child twice.
        """
        ...


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date ascending."""
        ...
