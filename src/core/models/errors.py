"""Custom exception classes for the pet photo service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_EMPTY_INPUT,
    ERROR_CODE_INVALID_NAME,
    ERROR_CODE_PET_NOT_FOUND,
    ERROR_CODE_PET_RECORD,
    ERROR_CODE_PHOTO_NOT_FOUND,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_STORAGE_IO,
    ERROR_CODE_UNSUPPORTED_MEDIA_TYPE,
    ERROR_CODE_VALIDATION_FAILED,
)


class PetPhotoServiceError(Exception):
    """
    Base exception for all pet photo service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(PetPhotoServiceError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class EmptyInputError(ValidationError):
    """Raised when an upload carries no bytes."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_EMPTY_INPUT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidNameError(ValidationError):
    """Raised when a file name or identifier could escape the photo root."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_NAME,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UnsupportedMediaTypeError(ValidationError):
    """Raised when the declared upload content type is not an image."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNSUPPORTED_MEDIA_TYPE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(PetPhotoServiceError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PetNotFoundError(NotFoundError):
    """Raised when no pet record matches the requested id."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PET_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PhotoNotFoundError(NotFoundError):
    """Raised when a pet has no photo, or its stored photo is missing."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PHOTO_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class StorageIOError(PetPhotoServiceError):
    """Raised when a photo storage operation fails at the filesystem level."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORAGE_IO,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class PetRecordError(PetPhotoServiceError):
    """Raised when a pet record operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PET_RECORD,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
