"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import PetPhotoServiceError
from core.utils.constants import get_max_file_size_mb
from core.utils.response import ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

JsonDict = dict[str, Any]


def _get_user_friendly_message(exc: Exception) -> str:
    """
    Convert technical exception messages into user-friendly ones.

    Preserves specific validation messages while making generic errors friendly.
    """
    exc_str = str(exc)

    friendly_prefixes = (
        "Invalid",
        "Missing",
        "Cannot",
        "Unable to",
        "Failed to",
        "Pet",
        "Photo",
        "File",
    )

    if exc_str and any(exc_str.startswith(prefix) for prefix in friendly_prefixes):
        return exc_str

    if isinstance(exc, ValueError):
        return "The provided data is invalid. Please check your input and try again."

    if isinstance(exc, (KeyError, AttributeError)):
        return "A required field is missing. Please ensure all required fields are provided."

    if isinstance(exc, TypeError):
        return "The data format is incorrect. Please check the request format."

    return "We encountered an issue processing your request. Please try again."


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    Provides:
    - Automatic CORS preflight (OPTIONS) handling
    - Last-resort translation of escaped exceptions into HTTP responses
    - Request ID tracking and structured logging

    Handlers are expected to map their own domain errors; anything reaching
    this decorator is logged with its traceback.

    Example:
        @api_gateway_handler
        def handler(event, context):
            return ResponseBuilder.ok({"message": "ok"})
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return {
                "statusCode": HTTPStatus.NO_CONTENT.value,
                "headers": ResponseBuilder._build_headers(cors_origin),
                "body": "",
            }

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)

        except PetPhotoServiceError as exc:
            _log_error(
                "Unhandled service error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.from_service_error(
                exc,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Client errors (4xx) - Bad Request
        except (
            ValueError,
            KeyError,
            TypeError,
            AttributeError,
        ) as exc:
            _log_error(
                "Validation error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.bad_request(
                _get_user_friendly_message(exc),
                request_id=request_id,
                cors_origin=cors_origin,
            )

        except PermissionError as exc:
            _log_error(
                "Permission denied in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.forbidden(
                "You don't have permission to perform this action.",
                request_id=request_id,
                cors_origin=cors_origin,
            )

        except (FileNotFoundError, LookupError) as exc:
            _log_error(
                "Resource not found",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.not_found(
                "The requested resource was not found.",
                request_id=request_id,
                cors_origin=cors_origin,
            )

        except MemoryError as exc:
            _log_error(
                "Memory error - payload too large",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.error(
                message=(
                    "The file is too large to process. "
                    f"Maximum size is {get_max_file_size_mb()}MB."
                ),
                status=HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Server errors (5xx) - Filesystem/Network issues
        except OSError as exc:
            _log_error(
                "Storage or connection error",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.error(
                message="Unable to reach required storage. Please try again later.",
                status=HTTPStatus.SERVICE_UNAVAILABLE,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        except Exception as exc:
            _log_error(
                "Unexpected error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.internal_error(
                "We're experiencing technical difficulties. Please try again in a few moments.",
                request_id=request_id,
                cors_origin=cors_origin,
            )

    return wrapper
