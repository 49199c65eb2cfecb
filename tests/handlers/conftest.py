import base64
import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

import handlers.delete_pet_photo.handler as delete_handler_module
import handlers.get_pet_photo.handler as get_handler_module
import handlers.upload_pet_photo.handler as upload_handler_module


@pytest.fixture(autouse=True)
def handler_photo_store(photo_store, monkeypatch):
    """Point every handler's process-wide store at the per-test photo root."""
    for module in (delete_handler_module, get_handler_module, upload_handler_module):
        monkeypatch.setattr(module, "photo_store", photo_store)

    return photo_store


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture
def pet_photo_event() -> Callable[..., dict[str, Any]]:
    """
    Build an API Gateway proxy event for /v1/pets/{pet_id}/photo.

    Usage:
        event = pet_photo_event("1", method="GET")
    """

    def _event(pet_id: str | None, *, method: str = "GET") -> dict[str, Any]:
        return {
            "httpMethod": method,
            "path": f"/v1/pets/{pet_id}/photo",
            "pathParameters": {"pet_id": pet_id} if pet_id is not None else None,
            "headers": {"x-api-key": "test-api-key"},
        }

    return _event


@pytest.fixture
def upload_event(pet_photo_event) -> Callable[..., dict[str, Any]]:
    """
    Build an upload event carrying a base64-encoded file.

    Usage:
        event = upload_event("1", b"...", file_name="cat.png")
    """

    def _event(
        pet_id: str | None,
        data: bytes,
        *,
        file_name: str | None = "cat.png",
        content_type: str | None = "image/png",
    ) -> dict[str, Any]:
        event = pet_photo_event(pet_id, method="POST")
        event["body"] = json.dumps(
            {
                "file": base64.b64encode(data).decode("utf-8"),
                "file_name": file_name,
                "content_type": content_type,
            }
        )
        event["headers"]["Content-Type"] = "application/json"
        return event

    return _event


def parse_body(resp: dict[str, Any]) -> dict[str, Any]:
    body = resp.get("body")
    if not body:
        return {}

    parsed: dict[str, Any] = json.loads(body)
    return parsed


@pytest.fixture
def body_of() -> Callable[[dict[str, Any]], dict[str, Any]]:
    return parse_body
