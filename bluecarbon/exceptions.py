import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger("bluecarbon.exceptions")


class RegistryError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Registry operation failed"
    default_code = "registry_error"


class Unauthenticated(RegistryError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication credentials were not provided or are invalid"
    default_code = "unauthenticated"


class AccessDenied(RegistryError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied"
    default_code = "access_denied"


class ValidationError(RegistryError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"
    default_code = "validation_error"


class NotFound(RegistryError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"
    default_code = "not_found"


class InvalidState(RegistryError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Operation not allowed in the current state"
    default_code = "invalid_state"


class ExternalServiceError(RegistryError):
    default_detail = "External service unavailable"
    default_code = "external_service_error"


def _first_message(data):
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
        return ""
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ""
    return str(data)


def registry_exception_handler(exc, context):
    """Render every API failure as ``{"error": ...}``."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "request.unhandled_error | view=%s error=%s",
            view.__class__.__name__ if view else None,
            str(exc),
        )
        return Response(
            {"error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    data = response.data
    if isinstance(data, dict) and set(data) == {"detail"}:
        response.data = {"error": str(data["detail"])}
    elif isinstance(data, dict):
        response.data = {"error": _first_message(data), "fields": data}
    else:
        response.data = {"error": _first_message(data)}

    return response
