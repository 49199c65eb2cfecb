"""
Lambda handler responsible for serving a pet's photo.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.config import get_photo_storage_path
from core.infrastructure.filesystem.local_photo_store import LocalPhotoStore
from core.models.errors import PetPhotoServiceError, StorageIOError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import GetPetPhotoRequest
from .service import GetService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()

# One store per execution environment, created during Lambda init
photo_store = LocalPhotoStore(get_photo_storage_path())


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle pet photo retrieval requests.

    Returns the raw photo as a base64-encoded binary response with the
    inferred content type and an inline Content-Disposition.

    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        API Gateway-compatible response dictionary.
    """
    logger.info(
        "Received pet photo request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    path_params = event.get("pathParameters") or {}

    try:
        request = validate_request(
            GetPetPhotoRequest,
            {"pet_id": path_params.get("pet_id")},
        )
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": sanitize_validation_errors(exc.errors())},
        )
        return ResponseBuilder.validation_error(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    try:
        photo = GetService(photo_store=photo_store).get_photo(request.pet_id)

    except StorageIOError as exc:
        logger.exception("Get pet photo failed", extra={"pet_id": request.pet_id})
        return ResponseBuilder.from_service_error(
            exc, message=f"Failed to load photo: {exc.message}"
        )

    except PetPhotoServiceError as exc:
        logger.warning(
            "Pet photo unavailable",
            extra={"pet_id": request.pet_id, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_service_error(exc)

    return ResponseBuilder.binary_response(
        photo.content,
        content_type=photo.content_type,
        headers={
            "Content-Disposition": f'inline; filename="{photo.file_name}"',
        },
    )
