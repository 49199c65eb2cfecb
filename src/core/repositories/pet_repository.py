"""Abstract contract for pet record persistence."""

from abc import ABC, abstractmethod

from core.models.pet import PetRecord


class PetRecordRepository(ABC):
    """Contract for looking up pets and updating their photo reference.

    Implementations could be DynamoDB, PostgreSQL, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def fetch_pet(self, *, pet_id: str) -> PetRecord | None:
        """Fetch a single pet by id.

        Returns:
            The pet record, or None if no pet has this id

        Raises:
            PetRecordError: If the lookup fails
        """

    @abstractmethod
    def save_pet(self, *, pet: PetRecord) -> None:
        """Create or replace a pet record.

        Raises:
            PetRecordError: If the write fails
        """

    @abstractmethod
    def set_photo_id(self, *, pet_id: str, photo_id: str | None) -> None:
        """Set or clear (photo_id=None) the pet's stored photo identifier.

        Raises:
            PetNotFoundError: If the pet no longer exists
            PetRecordError: If the update fails
        """
