"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in gymnastics/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from gymnastics.domain.value_objects import (
    PERSON_NAME_MAX_LENGTH,
    Capacity,
    ClassId,
    EventId,
    Money,
    PhoneNumber,
    SessionId,
    SessionSlot,
    require_text,
)


class CatalogKind(Enum):
    """The two singleton catalogs kept in storage."""

    SIGNUPS = "signups"
    UPCOMING = "upcoming"


class AppendOutcome(Enum):
    """Result of an atomic signee append."""

    APPENDED = "appended"
    DUPLICATE = "duplicate"
    FULL = "full"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    date: datetime
    duration: float | None = None


@dataclass(frozen=True)
class Signee:
    """A child registered by a parent for one session.

    Stored rows are loaded as-is; input rules apply only through create()
    and validate().
    """

    child_first_name: str
    child_last_name: str
    parent_first_name: str
    parent_last_name: str
    parent_phone_number: str

    @classmethod
    def create(
        cls,
        child_first_name: str,
        child_last_name: str,
        parent_first_name: str,
        parent_last_name: str,
        parent_phone_number: str,
    ) -> "Signee":
        """Build a validated signee from raw field values, lower-casing the names.

        Raises:
            ValueError: If a name is empty or too long, or the phone number is malformed.
        """
        signee = cls(
            child_first_name=child_first_name,
            child_last_name=child_last_name,
            parent_first_name=parent_first_name,
            parent_last_name=parent_last_name,
            parent_phone_number=parent_phone_number,
        )
        signee.validate()
        return signee.normalized()

    def validate(self) -> None:
        require_text("childFirstName", self.child_first_name, PERSON_NAME_MAX_LENGTH)
        require_text("childLastName", self.child_last_name, PERSON_NAME_MAX_LENGTH)
        require_text("parentFirstName", self.parent_first_name, PERSON_NAME_MAX_LENGTH)
        require_text("parentLastName", self.parent_last_name, PERSON_NAME_MAX_LENGTH)
        PhoneNumber(self.parent_phone_number)

    def normalized(self) -> "Signee":
        return replace(
            self,
            child_first_name=self.child_first_name.lower(),
            child_last_name=self.child_last_name.lower(),
            parent_first_name=self.parent_first_name.lower(),
            parent_last_name=self.parent_last_name.lower(),
        )

    def is_same_child(self, first_name: str, last_name: str) -> bool:
        return (
            self.child_first_name.lower() == first_name.lower()
            and self.child_last_name.lower() == last_name.lower()
        )


@dataclass(frozen=True)
class Session:
    """Domain representation of a bookable (day, time) offering of a class."""

    id: SessionId
    slot: SessionSlot
    max_signups: Capacity
    price: Money
    signees: tuple[Signee, ...] = ()

    @property
    def signee_count(self) -> int:
        return len(self.signees)

    @property
    def is_full(self) -> bool:
        return self.signee_count >= self.max_signups.value

    def has_signee(self, first_name: str, last_name: str) -> bool:
        return any(s.is_same_child(first_name, last_name) for s in self.signees)


@dataclass(frozen=True)
class GymClass:
    """Domain representation of a class and its sessions."""

    id: ClassId
    slug: str
    name: str
    sessions: tuple[Session, ...] = ()

    def find_session(self, slot: SessionSlot) -> Session | None:
        return next((s for s in self.sessions if s.slot == slot), None)


@dataclass(frozen=True)
class Catalog:
    """Domain representation of a whole signups or upcoming catalog."""

    kind: CatalogKind
    season: str
    classes: tuple[GymClass, ...] = ()

    def find_class(self, name: str) -> GymClass | None:
        return next((c for c in self.classes if c.name == name), None)


@dataclass(frozen=True)
class SessionSummary:
    """A session with its signee list collapsed to a count."""

    id: SessionId
    day: str
    time: str
    max_signups: int
    price: Money
    signee_count: int


@dataclass(frozen=True)
class ClassSummary:
    slug: str
    name: str
    sessions: tuple[SessionSummary, ...] = ()


@dataclass(frozen=True)
class CatalogSummary:
    kind: CatalogKind
    season: str
    classes: tuple[ClassSummary, ...] = ()


@dataclass(frozen=True)
class CatalogOverview:
    """Both catalogs as served by GET /classes."""

    signups: CatalogSummary
    upcoming: CatalogSummary


@dataclass(frozen=True)
class RegistrationResult:
    """Confirmation of a successful signup."""

    class_name: str
    slot: SessionSlot
    message: str = "Signup successful"
