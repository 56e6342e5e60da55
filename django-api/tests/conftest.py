"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest
from django.utils.text import slugify
from rest_framework.test import APIClient

from gymnastics.domain import CatalogKind


@pytest.fixture(scope="session")
def django_db_modify_db_settings(django_db_modify_db_settings_parallel_suffix, tmp_path_factory):
    """Put the SQLite test database in a file so threads share it through real locks."""
    from django.conf import settings

    default = settings.DATABASES["default"]
    if default["ENGINE"] == "django.db.backends.sqlite3":
        test_name = tmp_path_factory.mktemp("db") / "test.sqlite3"
        default.setdefault("TEST", {})["NAME"] = str(test_name)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_catalog(db):
    """Factory that seeds a catalog with classes and sessions.

    classes is a sequence of (class_name, [session kwargs, ...]).
    """
    from gymnastics import models

    def _make(kind: CatalogKind, season: str, classes=()):
        catalog = models.Catalog.objects.create(kind=kind.value, season=season)
        for class_position, (name, sessions) in enumerate(classes):
            gym_class = catalog.classes.create(
                name=name, slug=slugify(name), position=class_position
            )
            for session_position, session in enumerate(sessions):
                gym_class.sessions.create(position=session_position, **session)
        return catalog

    return _make


@pytest.fixture
def seeded_catalogs(make_catalog):
    signups = make_catalog(
        CatalogKind.SIGNUPS,
        "Fall 2026",
        [
            (
                "Tumbling",
                [
                    {"day": "Mon", "time": "4:00pm", "max_signups": 2, "price": Decimal("120.00")},
                    {"day": "Wed", "time": "5:30pm", "max_signups": 8, "price": Decimal("120.00")},
                ],
            ),
            (
                "Beam & Bars",
                [
                    {"day": "Sat", "time": "9:00am", "max_signups": 6, "price": Decimal("150.50")},
                ],
            ),
        ],
    )
    upcoming = make_catalog(
        CatalogKind.UPCOMING,
        "Winter 2027",
        [
            (
                "Ninja Zone",
                [
                    {"day": "Tue", "time": "6:00pm", "max_signups": 10, "price": Decimal("99.00")},
                ],
            ),
        ],
    )
    return signups, upcoming


@pytest.fixture
def tumbling_session(seeded_catalogs):
    from gymnastics import models

    return models.ClassSession.objects.get(
        gym_class__catalog__kind=CatalogKind.SIGNUPS.value,
        gym_class__name="Tumbling",
        day="Mon",
        time="4:00pm",
    )


@pytest.fixture
def signup_payload():
    """Factory for POST /class-signup bodies."""

    def _payload(
        child_first_name: str = "Ana",
        child_last_name: str = "Lee",
        class_name: str = "Tumbling",
        day: str = "Mon",
        time: str = "4:00pm",
        **signee_overrides,
    ) -> dict:
        signee = {
            "childFirstName": child_first_name,
            "childLastName": child_last_name,
            "parentFirstName": "Maria",
            "parentLastName": "Lee",
            "parentPhoneNumber": "+1 555-010-2030",
        }
        signee.update(signee_overrides)
        return {"className": class_name, "day": day, "time": time, "signee": signee}

    return _payload
