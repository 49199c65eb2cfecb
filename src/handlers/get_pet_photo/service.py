"""
Business logic for pet photo retrieval.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_pets import DynamoDBPetRecords
from core.models.errors import (
    PetNotFoundError,
    PhotoNotFoundError,
    StorageIOError,
)
from core.models.pet import PetRecord
from core.repositories.pet_repository import PetRecordRepository
from core.repositories.photo_repository import PhotoStoreRepository
from core.utils.constants import ERROR_CODE_PHOTO_LOAD_FAILED

from .models import PetPhoto

logger = Logger(UTC=True)


class GetService:
    """Application service responsible for serving a pet's photo."""

    def __init__(
        self,
        photo_store: PhotoStoreRepository,
        pets: PetRecordRepository | None = None,
    ) -> None:
        self.photo_store = photo_store
        self.pets = pets or DynamoDBPetRecords()

    def get_photo(self, pet_id: str) -> PetPhoto:
        """
        Read the current photo of a pet.

        Raises:
            PetNotFoundError: If no pet has this id
            PhotoNotFoundError: If the pet has no photo or its file is gone
            StorageIOError: If the photo cannot be read
        """
        logger.debug("Fetching pet photo", extra={"pet_id": pet_id})

        pet = self._get_pet_or_raise(pet_id)

        if not pet.photo_id:
            logger.info("Pet has no photo", extra={"pet_id": pet_id})
            raise PhotoNotFoundError(
                message="No photo available for this pet",
                details={"pet_id": pet_id},
            )

        loaded = self.photo_store.load(pet.photo_id)

        try:
            with loaded.stream as stream:
                content = stream.read()
        except OSError as exc:
            logger.exception(
                "Failed to read photo",
                extra={"pet_id": pet_id, "photo_id": pet.photo_id},
            )
            raise StorageIOError(
                message="Unable to read photo",
                error_code=ERROR_CODE_PHOTO_LOAD_FAILED,
                details={"photo_id": pet.photo_id},
            ) from exc

        logger.info(
            "Pet photo loaded",
            extra={"pet_id": pet_id, "photo_id": pet.photo_id, "size": len(content)},
        )

        return PetPhoto(
            content=content,
            content_type=loaded.content_type,
            file_name=loaded.name,
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
