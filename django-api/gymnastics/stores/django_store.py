"""Django ORM implementation of the catalog and event stores."""

import logging

from django.db import IntegrityError, transaction
from django.db.models import Count, Prefetch

from gymnastics import models as orm
from gymnastics.domain import (
    AppendOutcome,
    Capacity,
    Catalog,
    CatalogKind,
    CatalogSummary,
    ClassId,
    ClassSummary,
    Event,
    EventId,
    GymClass,
    Money,
    Session,
    SessionId,
    SessionSlot,
    SessionSummary,
    Signee,
)
from gymnastics.stores.interfaces import CatalogStore, EventStore

logger = logging.getLogger(__name__)


def _to_signee(row: orm.Signee) -> Signee:
    return Signee(
        child_first_name=row.child_first_name,
        child_last_name=row.child_last_name,
        parent_first_name=row.parent_first_name,
        parent_last_name=row.parent_last_name,
        parent_phone_number=row.parent_phone_number,
    )


def _to_session(row: orm.ClassSession) -> Session:
    return Session(
        id=SessionId(row.id),
        slot=SessionSlot(day=row.day, time=row.time),
        max_signups=Capacity(row.max_signups),
        price=Money(row.price),
        signees=tuple(_to_signee(s) for s in row.signees.all()),
    )


def _to_class(row: orm.GymClass) -> GymClass:
    return GymClass(
        id=ClassId(row.id),
        slug=row.slug,
        name=row.name,
        sessions=tuple(_to_session(s) for s in row.sessions.all()),
    )


def _to_session_summary(row: orm.ClassSession) -> SessionSummary:
    return SessionSummary(
        id=SessionId(row.id),
        day=row.day,
        time=row.time,
        max_signups=row.max_signups,
        price=Money(row.price),
        signee_count=row.signee_count,
    )


def _to_class_summary(row: orm.GymClass) -> ClassSummary:
    return ClassSummary(
        slug=row.slug,
        name=row.name,
        sessions=tuple(_to_session_summary(s) for s in row.sessions.all()),
    )


class DjangoCatalogStore(CatalogStore):
    """Relational catalog store using Django ORM."""

    def get_catalog(self, kind: CatalogKind) -> Catalog | None:
        queryset = orm.Catalog.objects.prefetch_related(
            Prefetch("classes", queryset=orm.GymClass.objects.order_by("position")),
            Prefetch(
                "classes__sessions",
                queryset=orm.ClassSession.objects.order_by("position"),
            ),
            Prefetch(
                "classes__sessions__signees",
                queryset=orm.Signee.objects.order_by("created_at"),
            ),
        )
        try:
            row = queryset.get(kind=kind.value)
        except orm.Catalog.DoesNotExist:
            return None
        return Catalog(
            kind=kind,
            season=row.season,
            classes=tuple(_to_class(c) for c in row.classes.all()),
        )

    def get_catalog_summary(self, kind: CatalogKind) -> CatalogSummary | None:
        # Counts come from the database; signee rows are never loaded.
        sessions = orm.ClassSession.objects.annotate(
            signee_count=Count("signees")
        ).order_by("position")
        queryset = orm.Catalog.objects.prefetch_related(
            Prefetch("classes", queryset=orm.GymClass.objects.order_by("position")),
            Prefetch("classes__sessions", queryset=sessions),
        )
        try:
            row = queryset.get(kind=kind.value)
        except orm.Catalog.DoesNotExist:
            return None
        return CatalogSummary(
            kind=kind,
            season=row.season,
            classes=tuple(_to_class_summary(c) for c in row.classes.all()),
        )

    def append_signee_if_room_and_unique(
        self, class_id: ClassId, session_id: SessionId, signee: Signee
    ) -> AppendOutcome:
        with transaction.atomic():
            # Row lock serializes writers of this session until commit.
            try:
                session = (
                    orm.ClassSession.objects.select_for_update(of=("self",))
                    .filter(gym_class__catalog__kind=CatalogKind.SIGNUPS.value)
                    .get(pk=session_id.value, gym_class_id=class_id.value)
                )
            except orm.ClassSession.DoesNotExist:
                return AppendOutcome.NOT_FOUND

            signees = session.signees.all()
            if signees.filter(
                child_first_name__iexact=signee.child_first_name,
                child_last_name__iexact=signee.child_last_name,
            ).exists():
                return AppendOutcome.DUPLICATE
            if signees.count() >= session.max_signups:
                return AppendOutcome.FULL

            try:
                with transaction.atomic():
                    orm.Signee.objects.create(
                        session=session,
                        child_first_name=signee.child_first_name,
                        child_last_name=signee.child_last_name,
                        parent_first_name=signee.parent_first_name,
                        parent_last_name=signee.parent_last_name,
                        parent_phone_number=signee.parent_phone_number,
                    )
            except IntegrityError:
                logger.info("Unique constraint rejected signee for session %s", session_id.value)
                return AppendOutcome.DUPLICATE
        return AppendOutcome.APPENDED


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [
            Event(
                id=EventId(row.id),
                name=row.name,
                date=row.date,
                duration=row.duration,
            )
            for row in orm.Event.objects.order_by("date")
        ]
