"""
Pytest configuration and fixtures for pet photo service tests.
Provides AWS mocking, the pet records table and a temporary photo root.
"""

import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("PET_RECORDS_TABLE_NAME", "pet-records-test")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "pet-photo-service")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "PetPhotoService")
# Handler modules build their photo store at import time
os.environ.setdefault("PET_PHOTO_STORAGE_PATH", tempfile.mkdtemp(prefix="pet-photos-"))

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from core.infrastructure.filesystem.local_photo_store import LocalPhotoStore


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def pets_table(dynamodb_resource):
    """
    Create the pet records table for testing.

    moto discards the table when the mock context exits.
    """
    table_name = os.getenv("PET_RECORDS_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = dynamodb_resource.create_table(
            TableName=table_name,
            BillingMode="PAY_PER_REQUEST",
            KeySchema=[{"AttributeName": "pet_id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "pet_id", "AttributeType": "S"}],
        )
        table.wait_until_exists()

    return table


@pytest.fixture
def put_pet(pets_table) -> Callable[..., dict[str, Any]]:
    """
    Helper to insert a pet record.

    Usage:
        pet = put_pet("1", photo_id="abc.png")
    """

    def _put(
        pet_id: str,
        *,
        owner_id: str = "owner_1",
        name: str = "Leo",
        photo_id: str | None = None,
    ) -> dict[str, Any]:
        item: dict[str, Any] = {"pet_id": pet_id, "owner_id": owner_id, "name": name}
        if photo_id is not None:
            item["photo_id"] = photo_id

        pets_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def get_pet_item(pets_table) -> Callable[[str], dict[str, Any] | None]:
    """Helper to read a raw pet item."""

    def _get(pet_id: str) -> dict[str, Any] | None:
        response: dict[str, Any] = pets_table.get_item(Key={"pet_id": pet_id})
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture
def photo_root(tmp_path, monkeypatch) -> Path:
    """Photo storage directory, also exported through the environment."""
    root = tmp_path / "pet-photos"
    monkeypatch.setenv("PET_PHOTO_STORAGE_PATH", str(root))
    return root


@pytest.fixture
def photo_store(photo_root) -> LocalPhotoStore:
    return LocalPhotoStore(photo_root)


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    import base64

    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\xff\xd9"
    )
