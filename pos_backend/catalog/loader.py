# catalog/loader.py

"""
CATALOG LOADER

Builds the process catalog once:
- POS_CATALOG_CSV unset/empty -> built-in DEFAULT_PRODUCTS
- POS_CATALOG_CSV=/path/items.csv -> products read from the CSV

CSV format:
    tag_id,name,price,category
    A1B2C3D4,Milk (1L),40,Dairy

Header names are matched case-insensitively; extra columns are ignored.
"""

from __future__ import annotations

import csv
import logging
from functools import lru_cache
from pathlib import Path

from django.conf import settings

from catalog.products import DEFAULT_PRODUCTS, Catalog, Product, normalize_tag

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("tag_id", "name", "price", "category")


class CatalogLoadError(Exception):
    """Raised when a catalog file is missing, malformed or has invalid rows."""


def _resolve_columns(fieldnames) -> dict[str, str]:
    # Tolerate stray whitespace and header casing
    by_key = {(fn or "").strip().lower(): fn for fn in fieldnames or []}

    missing = [col for col in REQUIRED_COLUMNS if col not in by_key]
    if missing:
        raise CatalogLoadError(f"Catalog CSV is missing column(s): {', '.join(missing)}")

    return {col: by_key[col] for col in REQUIRED_COLUMNS}


def _parse_price(raw, *, line: int) -> int:
    value = (raw or "").strip()
    try:
        price = int(value)
    except ValueError:
        raise CatalogLoadError(f"Line {line}: price must be a whole number, got {value!r}")
    if price < 0:
        raise CatalogLoadError(f"Line {line}: price must not be negative")
    return price


def load_catalog_csv(csv_path) -> Catalog:
    path = Path(csv_path)
    if not path.is_file():
        raise CatalogLoadError(f"Catalog file not found: {path}")

    products: dict[str, Product] = {}

    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        columns = _resolve_columns(reader.fieldnames)

        # line 1 is the header
        for line, row in enumerate(reader, start=2):
            tag = normalize_tag(row.get(columns["tag_id"]))
            name = (row.get(columns["name"]) or "").strip()
            category = (row.get(columns["category"]) or "").strip()

            if not tag or not name or not category:
                raise CatalogLoadError(f"Line {line}: tag_id, name and category are required")
            if tag in products:
                raise CatalogLoadError(f"Line {line}: duplicate tag {tag}")

            products[tag] = Product(
                name=name,
                price=_parse_price(row.get(columns["price"]), line=line),
                category=category,
            )

    logger.info("Loaded %s products from catalog CSV %s", len(products), path)
    return Catalog(products)


def load_catalog(csv_path=None) -> Catalog:
    if csv_path:
        return load_catalog_csv(csv_path)
    return Catalog(DEFAULT_PRODUCTS)


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Process-wide catalog, built on first use from settings.POS_CATALOG_CSV."""
    return load_catalog(getattr(settings, "POS_CATALOG_CSV", "") or None)
