import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Catalog",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                (
                    "kind",
                    models.CharField(
                        choices=[("signups", "Signups"), ("upcoming", "Upcoming")],
                        max_length=16,
                        unique=True,
                    ),
                ),
                ("season", models.CharField(max_length=100)),
            ],
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("date", models.DateTimeField()),
                ("duration", models.FloatField(blank=True, null=True)),
            ],
            options={
                "ordering": ["date"],
                "indexes": [models.Index(fields=["date"], name="event_date_idx")],
            },
        ),
        migrations.CreateModel(
            name="GymClass",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=100)),
                ("slug", models.CharField(blank=True, max_length=100)),
                ("position", models.PositiveIntegerField(default=0)),
                (
                    "catalog",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="classes",
                        to="gymnastics.catalog",
                    ),
                ),
            ],
            options={
                "ordering": ["position"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("catalog", "name"), name="unique_class_name_per_catalog"
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="ClassSession",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("day", models.CharField(max_length=20)),
                ("time", models.CharField(max_length=20)),
                ("max_signups", models.PositiveIntegerField()),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("position", models.PositiveIntegerField(default=0)),
                (
                    "gym_class",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="sessions",
                        to="gymnastics.gymclass",
                    ),
                ),
            ],
            options={
                "ordering": ["position"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("gym_class", "day", "time"),
                        name="unique_session_slot_per_class",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Signee",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("child_first_name", models.CharField(max_length=50)),
                ("child_last_name", models.CharField(max_length=50)),
                ("parent_first_name", models.CharField(max_length=50)),
                ("parent_last_name", models.CharField(max_length=50)),
                ("parent_phone_number", models.CharField(max_length=32)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "session",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="signees",
                        to="gymnastics.classsession",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("session", "child_first_name", "child_last_name"),
                        name="unique_child_per_session",
                    )
                ],
            },
        ),
    ]
