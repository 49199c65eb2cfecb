"""Pydantic models for delete pet photo request/response."""

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import PET_ID_MAX_LENGTH, PET_ID_PATTERN


class DeletePetPhotoRequest(BaseModel):
    """Validation model for delete pet photo request."""

    model_config = ConfigDict(str_strip_whitespace=True)
    pet_id: str = Field(
        ...,
        min_length=1,
        max_length=PET_ID_MAX_LENGTH,
        pattern=PET_ID_PATTERN,
        description="Pet whose photo to delete",
    )


class DeletePetPhotoResponse(BaseModel):
    """Response model for successful photo deletion."""

    pet_id: str = Field(..., description="Pet the photo belonged to")
    message: str = Field(..., description="Success message")
    deleted_photo_id: str | None = Field(
        None, description="Identifier of the removed photo, if the pet had one"
    )
    deleted_at: str = Field(..., description="Deletion timestamp")
