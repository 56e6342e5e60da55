from gymnastics.domain.models import (
    AppendOutcome,
    Catalog,
    CatalogKind,
    CatalogOverview,
    CatalogSummary,
    ClassSummary,
    Event,
    GymClass,
    RegistrationResult,
    Session,
    SessionSummary,
    Signee,
)
from gymnastics.domain.value_objects import (
    Capacity,
    ClassId,
    EventId,
    Money,
    PhoneNumber,
    SessionId,
    SessionSlot,
)

__all__ = [
    "AppendOutcome",
    "Catalog",
    "CatalogKind",
    "CatalogOverview",
    "CatalogSummary",
    "ClassSummary",
    "Event",
    "GymClass",
    "RegistrationResult",
    "Session",
    "SessionSummary",
    "Signee",
    "Capacity",
    "ClassId",
    "EventId",
    "Money",
    "PhoneNumber",
    "SessionId",
    "SessionSlot",
]
