"""Registration service - signs a child up for a class session.

The snapshot checks give callers a precise error without touching the
write path; the store repeats them atomically with the insert, which is
what actually guarantees capacity and uniqueness under concurrency.
"""

import logging

from gymnastics.domain import (
    AppendOutcome,
    CatalogKind,
    RegistrationResult,
    SessionSlot,
    Signee,
)
from gymnastics.domain.errors import (
    CatalogUnavailableError,
    ClassNotFoundError,
    DuplicateSignupError,
    InvalidSignupError,
    SessionFullError,
    SessionNotFoundError,
)
from gymnastics.domain.value_objects import (
    CLASS_NAME_MAX_LENGTH,
    SLOT_FIELD_MAX_LENGTH,
    require_text,
)
from gymnastics.stores.interfaces import CatalogStore

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for class signups."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def register(
        self, class_name: str, day: str, time: str, signee: Signee
    ) -> RegistrationResult:
        """Register a child for the session of class_name held on day at time.

        Raises:
            InvalidSignupError: If the class name, day, time or signee is malformed.
            CatalogUnavailableError: If the signups catalog has not been seeded.
            ClassNotFoundError: If no class is named class_name.
            SessionNotFoundError: If the class has no session at (day, time).
            DuplicateSignupError: If the child is already in the session.
            SessionFullError: If the session has no room left.
        """
        slot = self._validated_request(class_name, day, time, signee)
        signee = signee.normalized()

        catalog = self._store.get_catalog(CatalogKind.SIGNUPS)
        if catalog is None:
            logger.error("Signup attempted but the signups catalog is missing")
            raise CatalogUnavailableError()

        gym_class = catalog.find_class(class_name)
        if gym_class is None:
            raise ClassNotFoundError(class_name)

        session = gym_class.find_session(slot)
        if session is None:
            raise SessionNotFoundError(class_name, day, time)

        if session.has_signee(signee.child_first_name, signee.child_last_name):
            raise DuplicateSignupError()
        if session.is_full:
            raise SessionFullError()

        outcome = self._store.append_signee_if_room_and_unique(
            gym_class.id, session.id, signee
        )
        if outcome is AppendOutcome.DUPLICATE:
            raise DuplicateSignupError()
        if outcome is AppendOutcome.FULL:
            logger.info("Session %s filled up before signup could be stored", session.id.value)
            raise SessionFullError()
        if outcome is AppendOutcome.NOT_FOUND:
            raise SessionNotFoundError(class_name, day, time)

        logger.info("Signup stored for %s on %s at %s", class_name, day, time)
        return RegistrationResult(class_name=class_name, slot=slot)

    @staticmethod
    def _validated_request(
        class_name: str, day: str, time: str, signee: Signee
    ) -> SessionSlot:
        errors: dict[str, list[str]] = {}
        for field, value, max_length in (
            ("className", class_name, CLASS_NAME_MAX_LENGTH),
            ("day", day, SLOT_FIELD_MAX_LENGTH),
            ("time", time, SLOT_FIELD_MAX_LENGTH),
        ):
            try:
                require_text(field, value, max_length)
            except ValueError as exc:
                errors[field] = [str(exc)]
        try:
            signee.validate()
        except ValueError as exc:
            errors["signee"] = [str(exc)]
        if errors:
            raise InvalidSignupError(errors)
        return SessionSlot(day=day, time=time)
