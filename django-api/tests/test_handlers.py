"""Unit tests for domain error to HTTP status mapping.

Run with: pytest tests/test_handlers.py -v
"""

import pytest

from gymnastics.domain import CatalogKind
from gymnastics.domain.errors import (
    CatalogNotFoundError,
    CatalogUnavailableError,
    ClassNotFoundError,
    DuplicateSignupError,
    InvalidSignupError,
    SessionFullError,
    SessionNotFoundError,
)
from gymnastics.handlers.exceptions import domain_error_response, domain_exception_handler


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (InvalidSignupError({"day": ["day must not be empty"]}), 400),
        (DuplicateSignupError(), 400),
        (SessionFullError(), 400),
        (CatalogNotFoundError(CatalogKind.UPCOMING), 404),
        (ClassNotFoundError("Trampoline"), 404),
        (SessionNotFoundError("Tumbling", "Fri", "4:00pm"), 404),
        (CatalogUnavailableError(), 500),
    ],
)
def test_domain_errors_map_to_status(error, status_code):
    response = domain_error_response(error)

    assert response.status_code == status_code
    assert response.data["code"] == error.code.value
    assert response.data["message"] == error.message


def test_validation_errors_carry_field_detail():
    response = domain_error_response(InvalidSignupError({"className": ["too long"]}))

    assert response.data["errors"] == {"className": ["too long"]}


def test_unexpected_errors_hide_details():
    response = domain_exception_handler(RuntimeError("password=hunter2"), {"view": None})

    assert response.status_code == 500
    assert "hunter2" not in str(response.data)
    assert response.data["message"] == "Server error"
