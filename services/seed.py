"""Loading of bundled seed data into the database."""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Tuple

from pydantic import TypeAdapter

from models.seed import MerchantSeed, SubcategorySeed
from logger import get_logger

logger = get_logger()

_SUBCATEGORY_SEEDS = TypeAdapter(List[SubcategorySeed])
_MERCHANT_SEEDS = TypeAdapter(List[MerchantSeed])


def _read_json(seed_file: Path):
    if not seed_file.exists():
        raise FileNotFoundError(f"Seed file not found: {seed_file}")

    with open(seed_file, "r", encoding="utf-8") as f:
        return json.load(f)


def seed_subcategories(services, seed_file: Path) -> Tuple[int, int]:
    """Insert subcategories from a seed file, skipping IDs that already exist.

    Args:
        services: Services container.
        seed_file: JSON file with a list of subcategory records.

    Returns:
        Tuple of (created count, skipped count).

    Raises:
        FileNotFoundError: If the seed file doesn't exist.
        pydantic.ValidationError: If a record is invalid.
    """
    records = _SUBCATEGORY_SEEDS.validate_python(_read_json(seed_file))
    now = datetime.now()

    created_count = 0
    skipped_count = 0
    for record in records:
        if services.subcategories.find(record.id):
            logger.info(f"⊘ Skipped subcategory '{record.id}' (already exists)")
            skipped_count += 1
            continue

        services.subcategories.create(record.to_subcategory(now))
        logger.info(f"✓ Created subcategory '{record.id}' ({record.name})")
        created_count += 1

    return created_count, skipped_count


def seed_merchants(services, seed_file: Path) -> Tuple[int, int]:
    """Insert merchants from a seed file, skipping IDs that already exist.

    File order is kept, since merchant matching picks the first match in
    insertion order.

    Args:
        services: Services container.
        seed_file: JSON file with a list of merchant records.

    Returns:
        Tuple of (created count, skipped count).

    Raises:
        FileNotFoundError: If the seed file doesn't exist.
        pydantic.ValidationError: If a record is invalid.
    """
    records = _MERCHANT_SEEDS.validate_python(_read_json(seed_file))
    now = datetime.now()

    created_count = 0
    skipped_count = 0
    for record in records:
        if services.merchants.find(record.id):
            logger.info(f"⊘ Skipped merchant '{record.id}' (already exists)")
            skipped_count += 1
            continue

        if services.subcategories.find(record.default_subcategory_id) is None:
            logger.warning(
                f"Merchant '{record.id}' refers to unknown subcategory "
                f"'{record.default_subcategory_id}'"
            )

        services.merchants.create(record.to_merchant(now))
        logger.info(f"✓ Created merchant '{record.id}' ({record.name})")
        created_count += 1

    return created_count, skipped_count
