"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_EMPTY_INPUT = "EMPTY_INPUT"
ERROR_CODE_INVALID_NAME = "INVALID_NAME"
ERROR_CODE_UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_PET_NOT_FOUND = "PET_NOT_FOUND"
ERROR_CODE_PHOTO_NOT_FOUND = "PHOTO_NOT_FOUND"

# Storage Errors
ERROR_CODE_STORAGE_IO = "STORAGE_IO_ERROR"
ERROR_CODE_PHOTO_UPLOAD_FAILED = "PHOTO_UPLOAD_FAILED"
ERROR_CODE_PHOTO_LOAD_FAILED = "PHOTO_LOAD_FAILED"
ERROR_CODE_PHOTO_DELETE_FAILED = "PHOTO_DELETE_FAILED"

# Pet Record / DynamoDB Errors
ERROR_CODE_PET_RECORD = "PET_RECORD_ERROR"
ERROR_CODE_PET_FETCH_FAILED = "PET_FETCH_FAILED"
ERROR_CODE_PET_UPDATE_FAILED = "PET_UPDATE_FAILED"
ERROR_CODE_PET_INVALID_FORMAT = "PET_INVALID_FORMAT"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# Photo Storage
# ============================================================================

DEFAULT_PHOTO_STORAGE_PATH = "./pet-photos"

# Gateway upload limit; the photo store itself does not bound file size.
MAX_FILE_SIZE = 4 * 1024 * 1024  # 4MB in bytes

COPY_BUFFER_SIZE = 64 * 1024

# Longest extension (dot included) carried into a photo identifier; longer
# suffixes are dropped so identifiers stay well under NAME_MAX
MAX_EXTENSION_LENGTH = 16

IMAGE_MIME_PREFIX = "image/"

DEFAULT_PHOTO_CONTENT_TYPE = "image/jpeg"

PHOTO_SUFFIX_CONTENT_TYPES: Final[dict[str, str]] = {
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


# ============================================================================
# Pet Record Constraints
# ============================================================================

PET_ID_PATTERN = r"^[a-zA-Z0-9_-]+$"
PET_ID_MAX_LENGTH = 64

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length,Content-Disposition"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_PET_RECORDS_TABLE_NAME = "PET_RECORDS_TABLE_NAME"
ENV_PET_PHOTO_STORAGE_PATH = "PET_PHOTO_STORAGE_PATH"

# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb() -> int:
    """Get maximum file size in megabytes."""
    return MAX_FILE_SIZE // (1024 * 1024)
