"""Mapping of domain errors to HTTP responses.

Registered as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Only the error code and
the user-safe message leave the service.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from gatherings.domain.errors import DomainError, ErrorCode, InvalidInputError

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ORGANIZER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INSUFFICIENT_INVENTORY: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_RSVPED: status.HTTP_409_CONFLICT,
    ErrorCode.PERSISTENCE_CONFLICT: status.HTTP_409_CONFLICT,
}


def domain_error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, InvalidInputError) and error.details:
        body["details"] = error.details
    status_code = STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(body, status=status_code)


def exception_handler(exc, context):
    if isinstance(exc, DomainError):
        logger.info("Request rejected with %s", exc.code.value)
        return domain_error_response(exc)
    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {
                "code": ErrorCode.INVALID_INPUT.value,
                "message": "Invalid input",
                "details": exc.detail,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )
    return drf_exception_handler(exc, context)
