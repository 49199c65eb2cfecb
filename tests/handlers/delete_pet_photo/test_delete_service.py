import pytest

from core.models.errors import InvalidNameError, PetNotFoundError, StorageIOError
from handlers.delete_pet_photo.service import DeleteService


class TestDeleteService:
    def test_delete_photo(self, put_pet, get_pet_item, photo_store) -> None:
        (photo_store.root / "abc.png").write_bytes(b"img")
        put_pet("1", photo_id="abc.png")

        result = DeleteService(photo_store=photo_store).delete_photo("1")

        assert result["pet_id"] == "1"
        assert result["deleted_photo_id"] == "abc.png"
        assert result["deleted_at"]
        assert not (photo_store.root / "abc.png").exists()
        assert "photo_id" not in get_pet_item("1")

    def test_delete_when_no_photo(self, put_pet, get_pet_item, photo_store) -> None:
        put_pet("1")

        result = DeleteService(photo_store=photo_store).delete_photo("1")

        assert result["deleted_photo_id"] is None
        assert "photo_id" not in get_pet_item("1")

    def test_delete_when_file_already_gone(self, put_pet, get_pet_item, photo_store) -> None:
        put_pet("1", photo_id="gone.png")

        DeleteService(photo_store=photo_store).delete_photo("1")

        assert "photo_id" not in get_pet_item("1")

    def test_delete_pet_not_found(self, pets_table, photo_store) -> None:
        with pytest.raises(PetNotFoundError):
            DeleteService(photo_store=photo_store).delete_photo("nope")

    def test_unsafe_reference_is_rejected(self, put_pet, get_pet_item, photo_store) -> None:
        put_pet("1", photo_id="../outside.png")

        with pytest.raises(InvalidNameError):
            DeleteService(photo_store=photo_store).delete_photo("1")

        assert get_pet_item("1")["photo_id"] == "../outside.png"

    def test_storage_failure_keeps_reference(self, put_pet, get_pet_item, photo_store, monkeypatch) -> None:
        put_pet("1", photo_id="abc.png")

        def fail_delete(identifier):
            raise StorageIOError(message="Permission denied", error_code="PHOTO_DELETE_FAILED")

        monkeypatch.setattr(photo_store, "delete", fail_delete)

        with pytest.raises(StorageIOError):
            DeleteService(photo_store=photo_store).delete_photo("1")

        assert get_pet_item("1")["photo_id"] == "abc.png"
