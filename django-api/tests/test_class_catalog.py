"""Integration tests for GET /classes.

Run with: pytest tests/test_class_catalog.py -v
"""

import pytest
from django.db import DatabaseError
from rest_framework.test import APIClient

from gymnastics import models
from gymnastics.domain import CatalogKind
from gymnastics.stores import DjangoCatalogStore


def add_signee(
    session: models.ClassSession, first: str, last: str, phone: str = "555-010-2030"
) -> None:
    session.signees.create(
        child_first_name=first,
        child_last_name=last,
        parent_first_name="maria",
        parent_last_name=last,
        parent_phone_number=phone,
    )


@pytest.mark.django_db
class TestClassCatalog:
    """Tests for GET /classes"""

    def test_returns_both_catalogs(self, api_client: APIClient, seeded_catalogs):
        response = api_client.get("/classes")

        assert response.status_code == 200
        body = response.json()
        assert body["signups"]["season"] == "Fall 2026"
        assert body["upcoming"]["season"] == "Winter 2027"
        assert [c["name"] for c in body["signups"]["classes"]] == ["Tumbling", "Beam & Bars"]
        assert body["upcoming"]["classes"][0]["id"] == "ninja-zone"

    def test_session_shape(self, api_client: APIClient, tumbling_session):
        response = api_client.get("/classes")

        session = response.json()["signups"]["classes"][0]["sessions"][0]
        assert session == {
            "id": str(tumbling_session.id),
            "day": "Mon",
            "time": "4:00pm",
            "maxSignups": 2,
            "price": 120.0,
            "signees": 0,
        }

    def test_signees_are_counts_not_personal_data(self, api_client: APIClient, tumbling_session):
        add_signee(tumbling_session, "ana", "lee")
        add_signee(tumbling_session, "ben", "kim")

        response = api_client.get("/classes")

        sessions = response.json()["signups"]["classes"][0]["sessions"]
        assert sessions[0]["signees"] == 2
        assert sessions[1]["signees"] == 0
        content = response.content.decode()
        assert "ana" not in content
        assert "555-010-2030" not in content
        assert "childFirstName" not in content

    def test_rows_stored_outside_the_api_are_still_counted(
        self, api_client: APIClient, tumbling_session
    ):
        add_signee(tumbling_session, "ana", "lee", phone="N/A")
        add_signee(tumbling_session, "", "kim")

        response = api_client.get("/classes")

        assert response.status_code == 200
        assert response.json()["signups"]["classes"][0]["sessions"][0]["signees"] == 2

    @pytest.mark.parametrize(
        ("missing", "message"),
        [
            (CatalogKind.SIGNUPS, "Signups not found"),
            (CatalogKind.UPCOMING, "Upcoming classes not found"),
        ],
    )
    def test_missing_catalog_returns_404(
        self, api_client: APIClient, seeded_catalogs, missing, message
    ):
        models.Catalog.objects.filter(kind=missing.value).delete()

        response = api_client.get("/classes")

        assert response.status_code == 404
        assert response.json()["message"] == message

    def test_empty_store_returns_404(self, api_client: APIClient):
        response = api_client.get("/classes")

        assert response.status_code == 404
        assert response.json()["code"] == "CATALOG_NOT_FOUND"

    def test_store_failure_returns_500(self, api_client: APIClient, monkeypatch):
        def broken(self, kind):
            raise DatabaseError("connection refused")

        monkeypatch.setattr(DjangoCatalogStore, "get_catalog_summary", broken)

        response = api_client.get("/classes")

        assert response.status_code == 500
        assert response.json() == {"code": "SERVER_ERROR", "message": "Server error"}
