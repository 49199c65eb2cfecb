from pydantic import BaseModel, ConfigDict, Field, StrictStr

from core.utils.constants import PET_ID_MAX_LENGTH, PET_ID_PATTERN


class GetPetPhotoRequest(BaseModel):
    """Validation model for get pet photo request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    pet_id: StrictStr = Field(
        ...,
        min_length=1,
        max_length=PET_ID_MAX_LENGTH,
        pattern=PET_ID_PATTERN,
        description="Pet whose photo to retrieve",
    )


class PetPhoto(BaseModel):
    """Photo content ready to be served."""

    content: bytes
    content_type: str
    file_name: str
