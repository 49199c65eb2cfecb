"""Business logic for pet photo upload.

This module coordinates pet lookup, upload validation, replacement of a
pet's previous photo, storage of the new photo and the pet record update,
translating failures into domain-specific errors.
"""

import base64
import io

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_pets import DynamoDBPetRecords
from core.models.errors import (
    EmptyInputError,
    PetNotFoundError,
    PetPhotoServiceError,
    StorageIOError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from core.models.pet import PetRecord
from core.repositories.pet_repository import PetRecordRepository
from core.repositories.photo_repository import PhotoStoreRepository
from core.utils.mime import is_image_mime_type

logger = Logger(UTC=True)


class UploadService:
    """Application service responsible for pet photo uploads.

    This service orchestrates:
    - Pet lookup
    - Upload validation (non-empty, image content type)
    - Best-effort removal of the pet's previous photo
    - Storing the new photo and recording its identifier on the pet
    """

    def __init__(
        self,
        photo_store: PhotoStoreRepository,
        pets: PetRecordRepository | None = None,
    ) -> None:
        """Initialize the upload service with required infrastructure dependencies."""
        self.photo_store = photo_store
        self.pets = pets or DynamoDBPetRecords()

    @staticmethod
    def decode_file(encoded: str) -> bytes:
        """Decode base64-encoded image data.

        Raises:
            ValidationError: If decoding fails
        """
        try:
            return base64.b64decode(encoded)
        except ValueError as exc:
            logger.exception("Failed to decode base64 image data")
            raise ValidationError(
                message="Invalid image data",
                details={"encoding": "base64"},
            ) from exc

    def upload_photo(
        self,
        *,
        pet_id: str,
        file_data: bytes,
        file_name: str | None,
        content_type: str | None,
    ) -> str:
        """Store a new photo for a pet, replacing any previous one.

        The upload flow is:
        1. Look up the pet
        2. Reject empty, non-image and badly named uploads
        3. Delete the previous photo (failures are ignored)
        4. Store the new photo; if that fails after the previous file was
           removed, clear the pet's now dangling reference
        5. Record the new identifier on the pet (roll back storage on failure)

        Returns:
            Identifier of the stored photo

        Raises:
            PetNotFoundError: If no pet has this id
            EmptyInputError: If the upload has no bytes
            UnsupportedMediaTypeError: If the content type is not image/*
            InvalidNameError: If the file name is missing or unsafe; the
                previous photo is kept
            StorageIOError: If the photo cannot be written
            PetRecordError: If the pet record cannot be updated
        """
        logger.debug("Starting pet photo upload", extra={"pet_id": pet_id})

        # Step 1: Look up the pet
        pet = self._get_pet_or_raise(pet_id)

        # Step 2: Validate the upload
        if not file_data:
            raise EmptyInputError(message="File is empty", details={"pet_id": pet_id})

        if not is_image_mime_type(content_type):
            logger.warning(
                "Rejected non-image upload",
                extra={"pet_id": pet_id, "content_type": content_type},
            )
            raise UnsupportedMediaTypeError(
                message="File must be an image",
                details={"content_type": content_type},
            )

        # Rejected names must leave the current photo untouched
        self.photo_store.validate_filename(file_name)

        # Step 3: Replace, not accumulate
        discarded = self._discard_previous_photo(pet)

        # Step 4: Store the new photo
        try:
            photo_id = self.photo_store.store(
                io.BytesIO(file_data),
                file_name,
                is_empty=not file_data,
            )
        except StorageIOError:
            if discarded:
                self._clear_photo_reference(pet_id)
            raise

        # Step 5: Point the pet at the new photo
        try:
            self.pets.set_photo_id(pet_id=pet_id, photo_id=photo_id)
        except PetPhotoServiceError:
            logger.exception(
                "Failed to record photo on pet",
                extra={"pet_id": pet_id, "photo_id": photo_id},
            )

            # Best-effort cleanup to avoid orphaned photo files
            try:
                self.photo_store.delete(photo_id)
            except PetPhotoServiceError:
                logger.warning(
                    "Failed to clean up stored photo after pet update failure",
                    extra={"photo_id": photo_id},
                )

            raise

        logger.info(
            "Pet photo uploaded successfully",
            extra={"pet_id": pet_id, "photo_id": photo_id},
        )
        return photo_id

    def _discard_previous_photo(self, pet: PetRecord) -> bool:
        """Delete the pet's current photo, ignoring any failure.

        A stale file must never block the new upload, so errors are logged
        and dropped here.

        Returns:
            True if a previous photo was removed
        """
        if not pet.photo_id:
            return False

        try:
            self.photo_store.delete(pet.photo_id)
        except PetPhotoServiceError:
            logger.warning(
                "Ignoring failure to delete previous photo",
                extra={"pet_id": pet.pet_id, "photo_id": pet.photo_id},
            )
            return False

        return True

    def _clear_photo_reference(self, pet_id: str) -> None:
        try:
            self.pets.set_photo_id(pet_id=pet_id, photo_id=None)
        except PetPhotoServiceError:
            logger.warning(
                "Failed to clear photo reference after storage failure",
                extra={"pet_id": pet_id},
            )

    def _get_pet_or_raise(self, pet_id: str) -> PetRecord:
        pet = self.pets.fetch_pet(pet_id=pet_id)

        if pet is None:
            logger.warning("Pet not found", extra={"pet_id": pet_id})
            raise PetNotFoundError(
                message=f"Pet not found with id: {pet_id}",
                details={"pet_id": pet_id},
            )

        return pet
