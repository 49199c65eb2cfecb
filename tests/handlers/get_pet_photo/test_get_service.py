from unittest.mock import MagicMock

import pytest

from core.models.errors import PetNotFoundError, PhotoNotFoundError, StorageIOError
from core.repositories.photo_repository import LoadedPhoto
from handlers.get_pet_photo.service import GetService


class TestGetService:
    def test_get_photo(self, put_pet, photo_store, sample_image_binary) -> None:
        (photo_store.root / "abc.png").write_bytes(sample_image_binary)
        put_pet("1", photo_id="abc.png")

        photo = GetService(photo_store=photo_store).get_photo("1")

        assert photo.content == sample_image_binary
        assert photo.content_type == "image/png"
        assert photo.file_name == "abc.png"

    def test_unknown_extension_defaults_to_jpeg(self, put_pet, photo_store) -> None:
        (photo_store.root / "abc").write_bytes(b"raw")
        put_pet("1", photo_id="abc")

        photo = GetService(photo_store=photo_store).get_photo("1")

        assert photo.content_type == "image/jpeg"

    def test_pet_not_found(self, pets_table, photo_store) -> None:
        with pytest.raises(PetNotFoundError):
            GetService(photo_store=photo_store).get_photo("404")

    def test_pet_without_photo(self, put_pet, photo_store) -> None:
        put_pet("1")

        with pytest.raises(PhotoNotFoundError, match="No photo available for this pet"):
            GetService(photo_store=photo_store).get_photo("1")

    def test_photo_file_missing(self, put_pet, photo_store) -> None:
        put_pet("1", photo_id="gone.png")

        with pytest.raises(PhotoNotFoundError):
            GetService(photo_store=photo_store).get_photo("1")

    def test_photo_reference_outside_store(self, put_pet, photo_store) -> None:
        put_pet("1", photo_id="../secret.png")

        with pytest.raises(PhotoNotFoundError):
            GetService(photo_store=photo_store).get_photo("1")

    def test_read_failure_becomes_storage_error(self, put_pet) -> None:
        put_pet("1", photo_id="abc.png")
        stream = MagicMock()
        stream.__enter__.return_value = stream
        stream.__exit__.return_value = False
        stream.read.side_effect = OSError("I/O error")
        store = MagicMock()
        store.load.return_value = LoadedPhoto(stream, "image/png", "abc.png")

        with pytest.raises(StorageIOError) as exc_info:
            GetService(photo_store=store).get_photo("1")

        assert exc_info.value.error_code == "PHOTO_LOAD_FAILED"
        stream.__exit__.assert_called_once()
