"""Shared pet record model."""

from pydantic import BaseModel, Field, StrictStr


class PetRecord(BaseModel):
    """Pet record as persisted in the pet records table.

    `photo_id` is the identifier returned by the photo store, or None when
    the pet has no photo.
    """

    pet_id: StrictStr = Field(..., description="Unique pet identifier")
    owner_id: StrictStr = Field(..., description="Owning owner identifier")
    name: StrictStr = Field(..., description="Pet name")

    photo_id: StrictStr | None = Field(None, description="Stored photo identifier")
