import pytest

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter


def test_requires_table_name(monkeypatch) -> None:
    monkeypatch.delenv("PET_RECORDS_TABLE_NAME", raising=False)

    with pytest.raises(RuntimeError, match="PET_RECORDS_TABLE_NAME"):
        DynamoDBAdapter()


def test_put_and_get_item(pets_table) -> None:
    adapter = DynamoDBAdapter()

    adapter.put_item(item={"pet_id": "1", "owner_id": "o", "name": "Leo"})
    response = adapter.get_item(key={"pet_id": "1"})

    assert response["Item"]["name"] == "Leo"


def test_update_item_with_values(pets_table) -> None:
    adapter = DynamoDBAdapter()
    adapter.put_item(item={"pet_id": "1", "owner_id": "o", "name": "Leo"})

    adapter.update_item(
        key={"pet_id": "1"},
        update_expression="SET photo_id = :photo_id",
        expression_attribute_values={":photo_id": "a.png"},
        condition_expression="attribute_exists(pet_id)",
    )

    assert adapter.get_item(key={"pet_id": "1"})["Item"]["photo_id"] == "a.png"


def test_update_item_without_values(pets_table) -> None:
    adapter = DynamoDBAdapter()
    adapter.put_item(item={"pet_id": "1", "owner_id": "o", "name": "Leo", "photo_id": "a.png"})

    adapter.update_item(key={"pet_id": "1"}, update_expression="REMOVE photo_id")

    assert "photo_id" not in adapter.get_item(key={"pet_id": "1"})["Item"]


def test_explicit_table_name(pets_table, monkeypatch) -> None:
    table_name = pets_table.name
    monkeypatch.delenv("PET_RECORDS_TABLE_NAME", raising=False)

    adapter = DynamoDBAdapter(table_name=table_name)

    assert adapter.get_item(key={"pet_id": "nope"}).get("Item") is None
