"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
The nested catalog document (catalog -> classes -> sessions -> signees) is
stored as one table per level.
"""

import uuid

from django.db import models

from gymnastics.domain.models import CatalogKind


class Catalog(models.Model):
    """Persistence model for the signups and upcoming catalogs."""

    KIND_CHOICES = [(kind.value, kind.name.title()) for kind in CatalogKind]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    kind = models.CharField(max_length=16, choices=KIND_CHOICES, unique=True)
    season = models.CharField(max_length=100)

    def __str__(self) -> str:
        return f"{self.kind} ({self.season})"


class GymClass(models.Model):
    """Persistence model for a class offered in a catalog."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    catalog = models.ForeignKey(Catalog, on_delete=models.CASCADE, related_name="classes")
    name = models.CharField(max_length=100)
    slug = models.CharField(max_length=100, blank=True)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["catalog", "name"], name="unique_class_name_per_catalog"
            ),
        ]

    def __str__(self) -> str:
        return self.name


class ClassSession(models.Model):
    """Persistence model for a (day, time) session of a class."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    gym_class = models.ForeignKey(
        GymClass, on_delete=models.CASCADE, related_name="sessions"
    )
    day = models.CharField(max_length=20)
    time = models.CharField(max_length=20)
    max_signups = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=10, decimal_places=2)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["gym_class", "day", "time"], name="unique_session_slot_per_class"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.gym_class.name} - {self.day} {self.time}"


class Signee(models.Model):
    """Persistence model for a child registered in a session."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        ClassSession, on_delete=models.CASCADE, related_name="signees"
    )
    child_first_name = models.CharField(max_length=50)
    child_last_name = models.CharField(max_length=50)
    parent_first_name = models.CharField(max_length=50)
    parent_last_name = models.CharField(max_length=50)
    parent_phone_number = models.CharField(max_length=32)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["session", "child_first_name", "child_last_name"],
                name="unique_child_per_session",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.child_first_name} {self.child_last_name}"


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    date = models.DateTimeField()
    duration = models.FloatField(blank=True, null=True)

    class Meta:
        ordering = ["date"]
        indexes = [
            models.Index(fields=["date"], name="event_date_idx"),
        ]

    def __str__(self) -> str:
        return self.name
