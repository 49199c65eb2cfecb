#!/usr/bin/env python3
"""
Seed script to populate pet records and, optionally, their photos.

Pet records are written straight to the pet records table; photos found
under seed/images are uploaded through the photo API when --api-id is given.

Run:
    PET_RECORDS_TABLE_NAME=pet-records-snd \
    poetry run python seed/seed_pets.py \
      --api-id <API-ID> \
      --api-key <API-KEY>
"""

import argparse
import base64
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

from core.infrastructure.aws.dynamodb_pets import DynamoDBPetRecords
from core.models.pet import PetRecord

logger = Logger(service="seed")


PHOTO_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/v1/pets/{1}/photo"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed pet records and photos")

    parser.add_argument(
        "--api-id",
        default=None,
        help="API Gateway ID (LocalStack); photos are skipped without it",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=5,
        help="Number of pets to seed",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "pets.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def upload_photo(
    item: dict[str, Any],
    *,
    api_id: str,
    headers: dict[str, str],
) -> None:
    image_path = Path(__file__).parent / "images" / item["photo"]

    if not image_path.exists():
        logger.warning("Photo file not found", extra={"path": str(image_path)})
        return

    payload: dict[str, Any] = {
        "file": base64.b64encode(image_path.read_bytes()).decode("utf-8"),
        "file_name": item["photo"],
        "content_type": item["content_type"],
    }

    response = requests.post(
        PHOTO_API_URL.format(api_id, item["pet_id"]),
        headers=headers,
        json=payload,
        timeout=30,
    )

    if response.ok:
        logger.info(
            "Seeded photo",
            extra={"pet_id": item["pet_id"], "response": response.json()},
        )
    else:
        logger.error(
            "Failed to seed photo",
            extra={
                "pet_id": item["pet_id"],
                "status": response.status_code,
                "response": response.text,
            },
        )


def seed_pets() -> None:
    try:
        args = parse_args()
        data = load_sample_data()
        pets = DynamoDBPetRecords()

        headers: dict[str, str] = {"Content-Type": "application/json"}
        if args.api_key:
            headers["x-api-key"] = args.api_key

        logger.info("Starting seeding process", extra={"api_id": args.api_id})

        for item in cast(list[dict[str, Any]], data.get("pets", []))[: args.limit]:
            pets.save_pet(
                pet=PetRecord(
                    pet_id=item["pet_id"],
                    owner_id=item["owner_id"],
                    name=item["name"],
                )
            )
            logger.info("Seeded pet", extra={"pet_id": item["pet_id"]})

            if args.api_id and item.get("photo"):
                upload_photo(item, api_id=args.api_id, headers=headers)

        logger.info("Seeding completed")

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_pets()
