"""Pydantic models for pet photo upload request/response."""

import base64
import binascii

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import (
    MAX_FILE_SIZE,
    PET_ID_MAX_LENGTH,
    PET_ID_PATTERN,
    get_max_file_size_mb,
)

logger = Logger(UTC=True)


class PetPhotoUploadRequest(BaseModel):
    """Validation model for pet photo upload request.

    An empty `file` passes validation on purpose; the service rejects it
    with a dedicated "File is empty" error.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    pet_id: str = Field(
        ...,
        min_length=1,
        max_length=PET_ID_MAX_LENGTH,
        pattern=PET_ID_PATTERN,
        description="Pet identifier taken from the path",
    )
    file: str = Field(..., description="Base64 encoded image file")
    file_name: str | None = Field(
        None, max_length=255, description="Original file name of the upload"
    )
    content_type: str | None = Field(
        None, max_length=255, description="Declared MIME type of the upload"
    )

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: str) -> str:
        """
        Validate base64 file:
        - must decode correctly
        - must not exceed MAX_FILE_SIZE
        """
        try:
            file_data = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error(f"File validation error: Invalid base64 - {e}")
            raise ValueError("Invalid base64 encoded file") from e

        if len(file_data) > MAX_FILE_SIZE:
            logger.error("File size validation error: File size exceeds limit")
            raise ValueError(f"File size exceeds {get_max_file_size_mb()}MB limit")

        return value


class PhotoUploadResponse(BaseModel):
    """Response model for successful photo upload."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., description="Success message")
    file_name: str = Field(
        ...,
        serialization_alias="fileName",
        description="Identifier of the stored photo",
    )
