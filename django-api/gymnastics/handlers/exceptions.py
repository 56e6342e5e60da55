"""Maps domain errors and unexpected failures to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Internal details are
logged, never returned to the caller.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from gymnastics.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    InvalidSignupError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

SERVER_ERROR_CODE = "SERVER_ERROR"
SERVER_ERROR_MESSAGE = "Server error"

STATUS_BY_CATEGORY = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(error: DomainError) -> int:
    for category, code in STATUS_BY_CATEGORY:
        if isinstance(error, category):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def domain_error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, InvalidSignupError):
        body["errors"] = error.errors
    return Response(body, status=status_for(error))


def domain_exception_handler(exc, context):
    """DRF exception handler aware of the domain error taxonomy."""
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else "unknown view"

    if isinstance(exc, DomainError):
        if isinstance(exc, InternalError):
            logger.error("%s failed: %s", view_name, exc)
        else:
            logger.info("%s rejected request: %s", view_name, exc)
        return domain_error_response(exc)

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, exceptions.ValidationError):
            logger.warning("Validation errors in %s: %s", view_name, response.data)
            response.data = {
                "code": "INVALID_REQUEST",
                "message": "Invalid request",
                "errors": response.data,
            }
        return response

    logger.exception("Unhandled error in %s", view_name, exc_info=exc)
    return Response(
        {"code": SERVER_ERROR_CODE, "message": SERVER_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
