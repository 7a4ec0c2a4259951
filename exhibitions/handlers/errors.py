"""Mapping of errors to HTTP responses.

Domain errors keep their code and user-safe message. Anything unexpected is
logged with its traceback and reported as an opaque internal error.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from exhibitions.domain.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}

ERROR_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    status.HTTP_406_NOT_ACCEPTABLE: "NOT_ACCEPTABLE",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "UNSUPPORTED_MEDIA_TYPE",
    status.HTTP_429_TOO_MANY_REQUESTS: "THROTTLED",
}


def _domain_error_response(exc: DomainError) -> Response:
    body = {"error": exc.code.value, "message": exc.message}
    field = getattr(exc, "field", None)
    if field:
        body["field"] = field

    headers = None
    if exc.kind is ErrorKind.UNAUTHORIZED:
        headers = {"WWW-Authenticate": 'Bearer realm="api"'}
    return Response(body, status=STATUS_BY_KIND[exc.kind], headers=headers)


def exception_handler(exc, context):
    """DRF exception handler used for every API view."""
    if isinstance(exc, DomainError):
        logger.info("Request rejected: %s", exc)
        return _domain_error_response(exc)

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {
                "error": "VALIDATION_ERROR",
                "message": "Invalid request parameters",
                "details": exc.detail,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
        response.data = {
            "error": ERROR_BY_STATUS.get(response.status_code, "ERROR"),
            "message": str(detail),
        }
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in %s", type(view).__name__ if view else "view", exc_info=exc
    )
    return Response(
        {"error": "INTERNAL_SERVER_ERROR", "message": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
