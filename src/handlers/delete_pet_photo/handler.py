"""
Lambda handler responsible for deleting a pet's photo.
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

from .models import DeletePetPhotoRequest, DeletePetPhotoResponse
from .service import DeleteService

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
    Handle pet photo deletion requests.

    This function:
    - Extracts the pet identifier from API Gateway path parameters
    - Validates the incoming request
    - Delegates deletion to the service layer
    - Translates domain errors into HTTP responses

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received pet photo delete request",
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
            DeletePetPhotoRequest,
            {"pet_id": path_params.get("pet_id")},
        )
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": sanitize_validation_errors(exc.errors())},
        )
        return ResponseBuilder.validation_error(
            message="Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    try:
        delete_result = DeleteService(photo_store=photo_store).delete_photo(request.pet_id)

    except StorageIOError as exc:
        logger.exception("Deletion failed", extra={"pet_id": request.pet_id})
        return ResponseBuilder.from_service_error(
            exc, message=f"Failed to delete photo: {exc.message}"
        )

    except PetPhotoServiceError as exc:
        logger.warning(
            "Pet photo deletion rejected",
            extra={"pet_id": request.pet_id, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_service_error(exc)

    response = DeletePetPhotoResponse(
        pet_id=delete_result["pet_id"],
        message="Photo deleted successfully",
        deleted_photo_id=delete_result["deleted_photo_id"],
        deleted_at=delete_result["deleted_at"],
    )

    return ResponseBuilder.ok(response.model_dump())
