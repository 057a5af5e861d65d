"""Map domain errors and framework errors onto the JSON error envelope.

Every failure response has the shape ``{"success": false, "<key>": message}``
where ``<key>`` is ``message`` unless the view sets ``error_key``.
Internal error details are only exposed when DEBUG is on.
"""

import logging

from django.conf import settings
from django.http import JsonResponse
from rest_framework import exceptions, status
from rest_framework.response import Response

from common.domain.errors import (
    AuthenticationError,
    BusinessRuleError,
    DomainError,
    GatewayError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_CATEGORY = (
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (GatewayError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(error: DomainError) -> int:
    for category, code in _STATUS_BY_CATEGORY:
        if isinstance(error, category):
            return code
    return status.HTTP_400_BAD_REQUEST


def _error_key(context: dict) -> str:
    view = context.get("view")
    return getattr(view, "error_key", "message")


def exception_handler(exc: Exception, context: dict) -> Response:
    key = _error_key(context)

    if isinstance(exc, DomainError):
        return Response({"success": False, key: exc.message}, status=status_for(exc))

    if isinstance(exc, exceptions.ValidationError):
        return Response(
            {"success": False, key: "Validation errors", "errors": exc.detail},
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, exceptions.APIException):
        headers = {}
        if getattr(exc, "auth_header", None):
            headers["WWW-Authenticate"] = exc.auth_header
        return Response(
            {"success": False, key: str(exc.detail)},
            status=exc.status_code,
            headers=headers,
        )

    logger.exception("Unhandled error in %s", context.get("view").__class__.__name__)
    body = {"success": False, key: "Something went wrong!"}
    if settings.DEBUG:
        body["detail"] = str(exc)
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


def not_found(request, exception=None) -> JsonResponse:
    return JsonResponse({"success": False, "message": "Route not found"}, status=404)


def server_error(request) -> JsonResponse:
    return JsonResponse({"success": False, "message": "Something went wrong!"}, status=500)
