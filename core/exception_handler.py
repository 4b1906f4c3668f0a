from django.db import DatabaseError
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.views import exception_handler

from core.exceptions import InternalError, ServiceError
from core.logging import configure_logger
from core.responses import error_envelope

logger = configure_logger("core.exception_handler")

MISSING_VALUE_CODES = {"required", "null", "blank", "empty"}


def _flatten_codes(codes):
    if isinstance(codes, dict):
        for value in codes.values():
            yield from _flatten_codes(value)
    elif isinstance(codes, (list, tuple)):
        for value in codes:
            yield from _flatten_codes(value)
    else:
        yield codes


def validation_message(exc: drf_exceptions.ValidationError, view) -> str:
    """Use the view's ``required_message`` when a field is missing or empty."""

    required_message = getattr(view, "required_message", None)
    if required_message and MISSING_VALUE_CODES & set(_flatten_codes(exc.get_codes())):
        return required_message
    return "Invalid input."


def envelope_exception_handler(exc, context):
    """Map service and framework errors onto the JSON error envelope."""

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if isinstance(exc, InternalError):
        logger.error("Internal error in %s: %s", view_name, exc.message)
        return error_envelope(InternalError.default_message, status=exc.status_code)

    if isinstance(exc, ServiceError):
        return error_envelope(exc.message, status=exc.status_code)

    if isinstance(exc, drf_exceptions.ValidationError):
        logger.info("Rejected request in %s: %s", view_name, exc.detail)
        return error_envelope(
            validation_message(exc, view),
            status=status.HTTP_400_BAD_REQUEST,
            errors=exc.detail,
        )

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        return error_envelope(str(detail or exc), status=response.status_code)

    if isinstance(exc, DatabaseError):
        logger.exception("Storage failure in %s", view_name)
    else:
        logger.exception("Unhandled error in %s", view_name)
    return error_envelope(InternalError.default_message, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
