#!/usr/bin/env python3
"""
Seed products from a JSON file (an exported catalogue or a hand-written list).
Every entry goes through the same validation as the admin form; entries that
fail validation are reported and skipped, the rest are inserted.

Usage:
    python scripts/seed_products.py --file ./catalogue.json
    python scripts/seed_products.py --file ./catalogue.json --database-url sqlite:///./dev.db
"""
import argparse
import json
import logging
import os
import sys
from typing import List, Tuple

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mittirang.config import settings
from mittirang.db import Database
from mittirang.exceptions import ProductValidationError
from mittirang.services.product_service import ProductService

logger = logging.getLogger("seed_products")


def _load_entries(path: str) -> List[dict]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise RuntimeError(f"Failed to parse JSON from {path}: {e}")

    # a bare list, or an object with an items list
    if isinstance(data, dict) and isinstance(data.get("items"), list):
        source_list = data["items"]
    elif isinstance(data, list):
        source_list = data
    else:
        source_list = []
    return [e for e in source_list if isinstance(e, dict)]


def _normalize_entry(entry: dict) -> dict:
    """Accept a few alternative key names used by older exports."""
    out = dict(entry)
    if "name" not in out and "title" in out:
        out["name"] = out["title"]
    if "sellingprice" not in out and "selling_price" in out:
        out["sellingprice"] = out["selling_price"]
    if "images" not in out and out.get("image"):
        out["images"] = [out["image"]]
    return out


def seed_from_file(path: str, database: Database) -> Tuple[int, int]:
    """Returns (created, skipped)."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    entries = [_normalize_entry(e) for e in _load_entries(path)]

    db = database.session()
    svc = ProductService(db)
    created = skipped = 0
    try:
        for idx, entry in enumerate(entries):
            try:
                svc.create(entry)
                created += 1
            except ProductValidationError as e:
                skipped += 1
                logger.warning("Skipping entry %d (%s): %s", idx, e.kind.value, e.message)
    finally:
        db.close()

    logger.info("Seeded products: %d created, %d skipped", created, skipped)
    return created, skipped


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="Path to product json (list or {items: [...]})")
    parser.add_argument("--database-url", default=settings.DATABASE_URL)
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    database = Database(args.database_url)
    database.init()
    try:
        seed_from_file(args.file, database)
    finally:
        database.close()
