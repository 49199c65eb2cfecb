"""Business logic for pet photo deletion.

This module removes a pet's stored photo and clears the reference on the
pet record. The file is deleted first so a failed record update never
leaves a reference pointing at a live file nobody can clear.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_pets import DynamoDBPetRecords
from core.models.errors import PetNotFoundError
from core.repositories.pet_repository import PetRecordRepository
from core.repositories.photo_repository import PhotoStoreRepository
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)


class DeleteService:
    """Application service responsible for deleting pet photos."""

    def __init__(
        self,
        photo_store: PhotoStoreRepository,
        pets: PetRecordRepository | None = None,
    ) -> None:
        """Initialize the delete service with required infrastructure dependencies."""
        self.photo_store = photo_store
        self.pets = pets or DynamoDBPetRecords()

    def delete_photo(self, pet_id: str) -> dict[str, Any]:
        """Delete a pet's photo and clear its photo reference.

        A pet without a photo is not an error; nothing is changed.

        Args:
            pet_id: Pet whose photo to delete

        Returns:
            A dictionary containing deletion confirmation details

        Raises:
            PetNotFoundError: If no pet has this id
            InvalidNameError: If the stored reference points outside the store
            StorageIOError: If the file cannot be removed
            PetRecordError: If the pet record cannot be updated
        """
        logger.debug("Starting pet photo deletion", extra={"pet_id": pet_id})

        pet = self.pets.fetch_pet(pet_id=pet_id)
        if pet is None:
            logger.warning("Pet not found", extra={"pet_id": pet_id})
            raise PetNotFoundError(
                message=f"Pet not found with id: {pet_id}",
                details={"pet_id": pet_id},
            )

        photo_id = pet.photo_id
        if photo_id is not None:
            self.photo_store.delete(photo_id)
            self.pets.set_photo_id(pet_id=pet_id, photo_id=None)
            logger.info(
                "Pet photo deleted successfully",
                extra={"pet_id": pet_id, "photo_id": photo_id},
            )

        return {
            "pet_id": pet_id,
            "deleted_photo_id": photo_id,
            "deleted_at": utc_now_iso(),
        }
