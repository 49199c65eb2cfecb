"""
Lambda handler responsible for uploading a pet's photo.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.config import get_photo_storage_path
from core.infrastructure.filesystem.local_photo_store import LocalPhotoStore
from core.models.errors import PetPhotoServiceError, StorageIOError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import PetPhotoUploadRequest, PhotoUploadResponse
from .service import UploadService

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
    Handle pet photo upload requests.

    The handler validates the JSON payload, decodes the base64 image,
    stores it as the pet's photo (replacing any previous one) and returns
    the generated photo identifier.

    Expected API Gateway event structure:
    {
        "pathParameters": {"pet_id": "..."},
        "body": "{\"file\": ..., \"file_name\": ..., \"content_type\": ...}"
    }

    Args:
        event: API Gateway Lambda proxy event containing the upload payload
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received pet photo upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request(message="Invalid JSON body")

    if not isinstance(body, dict):
        return ResponseBuilder.bad_request(message="Invalid JSON body")

    path_params = event.get("pathParameters") or {}

    try:
        request = validate_request(
            PetPhotoUploadRequest,
            {**body, "pet_id": path_params.get("pet_id")},
        )
    except PydanticValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": sanitize_validation_errors(exc.errors())},
        )
        return ResponseBuilder.validation_error(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    try:
        service = UploadService(photo_store=photo_store)
        file_data = service.decode_file(request.file)

        photo_id = service.upload_photo(
            pet_id=request.pet_id,
            file_data=file_data,
            file_name=request.file_name,
            content_type=request.content_type,
        )

    except StorageIOError as exc:
        logger.exception("Photo storage failed", extra={"pet_id": request.pet_id})
        return ResponseBuilder.from_service_error(
            exc, message=f"Failed to upload photo: {exc.message}"
        )

    except PetPhotoServiceError as exc:
        logger.warning(
            "Pet photo upload rejected",
            extra={"pet_id": request.pet_id, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_service_error(exc)

    response = PhotoUploadResponse(
        message="Photo uploaded successfully",
        file_name=photo_id,
    )

    return ResponseBuilder.ok(response.model_dump(by_alias=True))
