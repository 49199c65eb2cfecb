"""DynamoDB-backed implementation of PetRecordRepository."""

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError
from pydantic import ValidationError as PydanticValidationError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter, DynamoDBAdapterProtocol
from core.models.errors import PetNotFoundError, PetRecordError
from core.models.pet import PetRecord
from core.repositories.pet_repository import PetRecordRepository
from core.utils.constants import (
    ERROR_CODE_PET_FETCH_FAILED,
    ERROR_CODE_PET_INVALID_FORMAT,
    ERROR_CODE_PET_UPDATE_FAILED,
)

logger = Logger(UTC=True)


class DynamoDBPetRecords(PetRecordRepository):
    """DynamoDB-backed pet records keyed on `pet_id`.

    All boto3 errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def fetch_pet(self, *, pet_id: str) -> PetRecord | None:
        """Fetch a single pet.

        Raises:
            PetRecordError: If fetch fails or the stored item is malformed
        """
        logger.debug("Fetching pet", extra={"pet_id": pet_id})

        try:
            response = self._db.get_item(key={"pet_id": pet_id})
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"pet_id": pet_id})
            raise PetRecordError(
                message="Unable to retrieve pet record",
                error_code=ERROR_CODE_PET_FETCH_FAILED,
                details={"pet_id": pet_id},
            ) from exc

        item = response.get("Item")
        if item is None:
            return None

        try:
            return PetRecord.model_validate(item)
        except PydanticValidationError as exc:
            logger.error("Invalid pet record format", extra={"pet_id": pet_id})
            raise PetRecordError(
                message="Invalid pet record format",
                error_code=ERROR_CODE_PET_INVALID_FORMAT,
                details={"pet_id": pet_id},
            ) from exc

    def save_pet(self, *, pet: PetRecord) -> None:
        """Create or replace a pet record.

        Raises:
            PetRecordError: If the write fails
        """
        logger.debug("Saving pet", extra={"pet_id": pet.pet_id})

        try:
            self._db.put_item(item=pet.model_dump(exclude_none=True))
        except ClientError as exc:
            logger.error("DynamoDB put_item failed", extra={"pet_id": pet.pet_id})
            raise PetRecordError(
                message="Unable to save pet record",
                error_code=ERROR_CODE_PET_UPDATE_FAILED,
                details={"pet_id": pet.pet_id},
            ) from exc

        logger.info("Pet saved", extra={"pet_id": pet.pet_id})

    def set_photo_id(self, *, pet_id: str, photo_id: str | None) -> None:
        """Set the pet's photo identifier, or remove the attribute when None.

        Raises:
            PetNotFoundError: If the pet was removed concurrently
            PetRecordError: If the update fails
        """
        logger.debug(
            "Updating pet photo reference",
            extra={"pet_id": pet_id, "photo_id": photo_id},
        )

        if photo_id is None:
            update_expression = "REMOVE photo_id"
            values = None
        else:
            update_expression = "SET photo_id = :photo_id"
            values = {":photo_id": photo_id}

        try:
            self._db.update_item(
                key={"pet_id": pet_id},
                update_expression=update_expression,
                expression_attribute_values=values,
                condition_expression="attribute_exists(pet_id)",
            )
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                logger.warning("Pet vanished before photo update", extra={"pet_id": pet_id})
                raise PetNotFoundError(
                    message=f"Pet not found with id: {pet_id}",
                    details={"pet_id": pet_id},
                ) from exc

            logger.error("DynamoDB update_item failed", extra={"pet_id": pet_id})
            raise PetRecordError(
                message="Unable to update pet record",
                error_code=ERROR_CODE_PET_UPDATE_FAILED,
                details={"pet_id": pet_id},
            ) from exc

        logger.info(
            "Pet photo reference updated",
            extra={"pet_id": pet_id, "photo_id": photo_id},
        )
