# catalog/products.py

"""
CATALOG DOMAIN

Purpose:
- Product value object (name, integer price, category).
- Catalog: read-only mapping of normalized tag -> Product.
- Tag normalization shared by lookups and cart item identity.

Rules:
- Tags are normalized (uppercase, all whitespace removed) before every lookup.
- An empty normalized tag is not an error; it simply is not in the catalog.
- The catalog is fixed once built; nothing mutates it.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

_WHITESPACE = re.compile(r"\s+")


def normalize_tag(raw) -> str:
    """Uppercase the tag and strip every whitespace character, anywhere in it."""
    if raw is None:
        return ""
    return _WHITESPACE.sub("", str(raw)).upper()


@dataclass(frozen=True)
class Product:
    name: str
    price: int
    category: str

    def to_dict(self) -> dict:
        return asdict(self)


class Catalog:
    """
    Read-only product catalog.

    Keys are stored normalized, so `catalog.get(" a1b2 c3d4 ")` finds "A1B2C3D4".
    """

    def __init__(self, products: Mapping[str, Product]):
        normalized = {}
        for tag, product in products.items():
            key = normalize_tag(tag)
            if not key:
                raise ValueError("Catalog tags must not be empty.")
            normalized[key] = product
        self._products = MappingProxyType(normalized)

    def get(self, tag) -> Product | None:
        return self._products.get(normalize_tag(tag))

    def __contains__(self, tag) -> bool:
        return normalize_tag(tag) in self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def items(self):
        return self._products.items()

    def as_dict(self) -> dict[str, dict]:
        return {tag: product.to_dict() for tag, product in self._products.items()}


# -----------------------------------------
# BUILT-IN CATALOG
# -----------------------------------------
DEFAULT_PRODUCTS: dict[str, Product] = {
    "A1B2C3D4": Product(name="Milk (1L)", price=40, category="Dairy"),
    "11223344": Product(name="Bread (White)", price=30, category="Bakery"),
    "55667788": Product(name="Rice (1kg)", price=65, category="Grains"),
    "AABBCCDD": Product(name="Eggs (6 pcs)", price=48, category="Dairy"),
    "99887766": Product(name="Butter (100g)", price=55, category="Dairy"),
    "DEADBEEF": Product(name="Apple Juice (500ml)", price=80, category="Beverages"),
    "CAFEBABE": Product(name="Biscuits (200g)", price=25, category="Snacks"),
    "F00DCAFE": Product(name="Chips (150g)", price=35, category="Snacks"),
}
