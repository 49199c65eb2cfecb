import base64
from unittest.mock import patch

from core.models.errors import StorageIOError
from handlers.get_pet_photo.handler import handler


def test_get_photo_success(put_pet, photo_root, pet_photo_event, lambda_context, sample_image_binary):
    (photo_root / "abc.png").write_bytes(sample_image_binary)
    put_pet("1", photo_id="abc.png")

    resp = handler(pet_photo_event("1"), lambda_context)

    assert resp["statusCode"] == 200
    assert resp["isBase64Encoded"] is True
    assert base64.b64decode(resp["body"]) == sample_image_binary
    assert resp["headers"]["Content-Type"] == "image/png"
    assert resp["headers"]["Content-Disposition"] == 'inline; filename="abc.png"'
    assert resp["headers"]["Content-Length"] == str(len(sample_image_binary))


def test_get_photo_pet_not_found(pets_table, photo_root, pet_photo_event, body_of, lambda_context):
    resp = handler(pet_photo_event("7"), lambda_context)

    assert resp["statusCode"] == 404
    assert body_of(resp)["error"] == "PET_NOT_FOUND"


def test_get_photo_none_uploaded(put_pet, photo_root, pet_photo_event, body_of, lambda_context):
    put_pet("1")

    resp = handler(pet_photo_event("1"), lambda_context)

    assert resp["statusCode"] == 404
    body = body_of(resp)
    assert body["error"] == "PHOTO_NOT_FOUND"
    assert body["message"] == "No photo available for this pet"


def test_get_photo_missing_path_parameter(pets_table, pet_photo_event, body_of, lambda_context):
    resp = handler(pet_photo_event(None), lambda_context)

    assert resp["statusCode"] == 400
    assert body_of(resp)["error"] == "VALIDATION_FAILED"


def test_get_photo_storage_failure(put_pet, photo_root, pet_photo_event, body_of, lambda_context):
    put_pet("1", photo_id="abc.png")

    with patch(
        "handlers.get_pet_photo.handler.GetService.get_photo",
        side_effect=StorageIOError(message="Unable to read photo", error_code="PHOTO_LOAD_FAILED"),
    ):
        resp = handler(pet_photo_event("1"), lambda_context)

    assert resp["statusCode"] == 500
    assert body_of(resp)["message"] == "Failed to load photo: Unable to read photo"
