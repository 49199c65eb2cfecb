#!/usr/bin/env python3
"""
Cleanup script to remove seeded pet photos via API endpoints.

Run:
    poetry run python seed/cleanup_pets.py \
      --api-id <API-ID> \
      --api-key <API-KEY>
"""

import argparse
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

PHOTO_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/v1/pets/{1}/photo"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete photos of seeded pets")

    parser.add_argument(
        "--api-id",
        required=True,
        help="API Gateway ID (LocalStack)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )

    return parser.parse_args()


def cleanup_pets() -> None:
    try:
        args = parse_args()

        headers: dict[str, str] = {}
        if args.api_key:
            headers["x-api-key"] = args.api_key

        data_file = Path(__file__).parent / "data" / "pets.json"
        with open(data_file, encoding="utf-8") as f:
            pets = cast(list[dict[str, Any]], json.load(f).get("pets", []))

        logger.info("Starting cleanup process", extra={"api_id": args.api_id})

        for pet in pets:
            pet_id = pet["pet_id"]

            delete_resp = requests.delete(
                PHOTO_API_URL.format(args.api_id, pet_id),
                headers=headers,
                timeout=30,
            )

            if delete_resp.ok:
                logger.info("Deleted pet photo", extra={"pet_id": pet_id})
            else:
                logger.error(
                    "Failed to delete pet photo",
                    extra={
                        "pet_id": pet_id,
                        "status": delete_resp.status_code,
                        "response": delete_resp.text,
                    },
                )

        logger.info("Cleanup completed successfully")

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_pets()
