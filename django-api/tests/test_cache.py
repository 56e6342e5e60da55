"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from datetime import datetime, timezone

import pytest
from django.core.cache import cache

from gymnastics import models
from gymnastics.cache import EVENTS_LIST_KEY


def create_event(name: str = "Open gym") -> models.Event:
    return models.Event.objects.create(
        name=name, date=datetime(2026, 11, 7, 10, tzinfo=timezone.utc)
    )


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_list_request_populates_cache(self, api_client):
        create_event()

        api_client.get("/events")

        assert [e["name"] for e in cache.get(EVENTS_LIST_KEY)] == ["Open gym"]

    def test_event_save_invalidates_list_cache(self, api_client):
        event = create_event()
        api_client.get("/events")

        event.name = "Open gym (extended)"
        event.save()

        assert cache.get(EVENTS_LIST_KEY) is None
        assert api_client.get("/events").json()[0]["name"] == "Open gym (extended)"

    def test_event_delete_invalidates_list_cache(self, api_client):
        event = create_event()
        api_client.get("/events")

        event.delete()

        assert cache.get(EVENTS_LIST_KEY) is None
        assert api_client.get("/events").json() == []

    def test_catalog_is_never_cached(self, api_client, tumbling_session):
        first = api_client.get("/classes").json()
        tumbling_session.signees.create(
            child_first_name="ana",
            child_last_name="lee",
            parent_first_name="maria",
            parent_last_name="lee",
            parent_phone_number="555-010-2030",
        )

        second = api_client.get("/classes").json()

        assert first["signups"]["classes"][0]["sessions"][0]["signees"] == 0
        assert second["signups"]["classes"][0]["sessions"][0]["signees"] == 1
