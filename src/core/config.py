"""Environment-driven configuration."""

import os

from core.utils.constants import DEFAULT_PHOTO_STORAGE_PATH, ENV_PET_PHOTO_STORAGE_PATH


def get_photo_storage_path() -> str:
    """Return the photo root directory, defaulting to ./pet-photos."""
    return os.getenv(ENV_PET_PHOTO_STORAGE_PATH) or DEFAULT_PHOTO_STORAGE_PATH
