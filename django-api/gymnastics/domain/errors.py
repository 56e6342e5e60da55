"""Domain error codes for the gymnastics module."""

from dataclasses import dataclass
from enum import Enum

from gymnastics.domain.models import CatalogKind


class ErrorCode(Enum):
    """Domain error codes."""

    CATALOG_NOT_FOUND = "CATALOG_NOT_FOUND"
    CATALOG_UNAVAILABLE = "CATALOG_UNAVAILABLE"
    CLASS_NOT_FOUND = "CLASS_NOT_FOUND"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    ALREADY_SIGNED_UP = "ALREADY_SIGNED_UP"
    SESSION_FULL = "SESSION_FULL"
    INVALID_SIGNUP = "INVALID_SIGNUP"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Input is malformed or out of bounds."""


class NotFoundError(DomainError):
    """A catalog, class or session does not exist."""


class ConflictError(DomainError):
    """The request clashes with current session state."""


class InternalError(DomainError):
    """The back end is not in a state to serve the request."""


CATALOG_NOT_FOUND_MESSAGES = {
    CatalogKind.SIGNUPS: "Signups not found",
    CatalogKind.UPCOMING: "Upcoming classes not found",
}


class CatalogNotFoundError(NotFoundError):
    """Raised when a singleton catalog has not been seeded."""

    def __init__(self, kind: CatalogKind) -> None:
        super().__init__(
            code=ErrorCode.CATALOG_NOT_FOUND,
            message=CATALOG_NOT_FOUND_MESSAGES[kind],
        )
        self.kind = kind


class CatalogUnavailableError(InternalError):
    """Raised when a signup arrives but the signups catalog is missing."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CATALOG_UNAVAILABLE,
            message="No class data found",
        )


class ClassNotFoundError(NotFoundError):
    """Raised when no class matches the requested name."""

    def __init__(self, class_name: str) -> None:
        super().__init__(code=ErrorCode.CLASS_NOT_FOUND, message="Class not found")
        self.class_name = class_name


class SessionNotFoundError(NotFoundError):
    """Raised when the class has no session on the requested day and time."""

    def __init__(self, class_name: str, day: str, time: str) -> None:
        super().__init__(code=ErrorCode.SESSION_NOT_FOUND, message="Session not found")
        self.class_name = class_name
        self.day = day
        self.time = time


class DuplicateSignupError(ConflictError):
    """Raised when the child is already registered for the session."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.ALREADY_SIGNED_UP, message="Already signed up")


class SessionFullError(ConflictError):
    """Raised when the session has reached its maximum signups."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.SESSION_FULL, message="Session is full")


class InvalidSignupError(ValidationError):
    """Raised when signup fields fail structural validation."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(code=ErrorCode.INVALID_SIGNUP, message="Invalid signup request")
        self.errors = errors
