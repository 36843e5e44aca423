"""Global exception handlers for the network service."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions.follow_exceptions import (
    FollowStorageError,
    InvalidFollowOperationError,
    UserNotFoundError,
)
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)

STORAGE_FAILURE_MESSAGE = "Unable to update the network right now. Please try again."


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    Handles DRF, Django and follow graph exceptions, providing:
    - Standard response format for clients:
      {success, status, message, request_id, timestamp}
    - Detailed logging for troubleshooting: error type, path, stack trace

    Storage failures never expose database detail to the client.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else None
    request_id = get_request_id()

    # Let DRF handle its own exceptions first
    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, InvalidFollowOperationError):
            status_code = status.HTTP_400_BAD_REQUEST
            message = str(exc)
        elif isinstance(exc, (UserNotFoundError, Http404)):
            status_code = status.HTTP_404_NOT_FOUND
            message = (
                str(exc)
                if isinstance(exc, UserNotFoundError)
                else "The requested resource was not found."
            )
        elif isinstance(exc, PermissionDenied):
            status_code = status.HTTP_403_FORBIDDEN
            message = "You do not have permission to perform this action."
        elif isinstance(exc, FollowStorageError):
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            message = STORAGE_FAILURE_MESSAGE
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            message = "An internal server error occurred."

        response = Response(
            _create_error_response(
                status_code=status_code, message=message, request_id=request_id
            ),
            status=status_code,
        )

    if request_id and response:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)

    return response


def _create_error_response(
    status_code: int, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response.

    Args:
        status_code: The HTTP status code.
        message: The error message to return to the client.
        request_id: The request ID for tracing.

    Returns:
        Dictionary with standard error response format.
    """
    return {
        "success": False,
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _log_exception(
    exc: Exception,
    request: Any,
    response: Response | None,
) -> None:
    """Log exception information, at WARNING for 4xx and ERROR otherwise.

    In DEBUG mode, logs include stack traces and request details.

    Args:
        exc: The exception that was raised.
        request: The HTTP request object.
        response: The response object (if available).
    """
    status_code = response.status_code if response else 500
    log_level = logging.WARNING if 400 <= status_code < 500 else logging.ERROR

    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    # Storage failures carry the database error as their cause
    if isinstance(exc, FollowStorageError) and exc.__cause__ is not None:
        log_message += f" | Cause: {type(exc.__cause__).__name__}: {exc.__cause__}"

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

        if request:
            log_message += f"\nRequest details: {_get_request_details(request)}"

    logger.log(log_level, log_message)


def _get_request_details(request: Any) -> str:
    """Extract relevant request details for logging.

    Args:
        request: The HTTP request object.

    Returns:
        String with formatted request details.
    """
    details = {
        "method": request.method,
        "path": request.path,
        "ip": request.META.get("REMOTE_ADDR", "unknown"),
    }

    if getattr(request, "GET", None):
        details["query_params"] = dict(request.GET)

    return str(details)
