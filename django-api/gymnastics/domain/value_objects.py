"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

CLASS_NAME_MAX_LENGTH = 100
SLOT_FIELD_MAX_LENGTH = 20
PERSON_NAME_MAX_LENGTH = 50

PHONE_PATTERN = re.compile(r"^\+?[0-9(][0-9 ().-]*[0-9]$")
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15


def require_text(field: str, value: str, max_length: int) -> str:
    """Return value if it is a non-blank string of at most max_length chars."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} must not be empty")
    if len(value) > max_length:
        raise ValueError(f"{field} must be at most {max_length} characters")
    return value


def is_valid_phone_number(value: str) -> bool:
    if not PHONE_PATTERN.match(value):
        return False
    digits = sum(ch.isdigit() for ch in value)
    return PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS


@dataclass(frozen=True)
class ClassId:
    """Unique identifier for a GymClass."""

    value: UUID


@dataclass(frozen=True)
class SessionId:
    """Unique identifier for a Session."""

    value: UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class PhoneNumber:
    """Syntactically valid phone number, kept as the caller wrote it."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_phone_number(self.value):
            raise ValueError("parentPhoneNumber is not a valid phone number")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SessionSlot:
    """The (day, time) pair that identifies a session within a class."""

    day: str
    time: str
