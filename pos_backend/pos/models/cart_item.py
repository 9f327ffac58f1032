"""
PATH: pos/models/cart_item.py

CART ITEM

Purpose:
- One scanned product inside a cart.
- Price, name and category are snapshotted from the catalog at scan time.

Rules:
- Immutable: an item is added or removed wholesale, never edited in place.
- Identity inside a cart is the normalized tag_id.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from catalog.products import Product


@dataclass(frozen=True)
class CartItem:
    tag_id: str
    name: str
    price: int
    category: str
    scanned_at: datetime

    @classmethod
    def from_product(cls, *, tag_id: str, product: Product, scanned_at: datetime) -> "CartItem":
        return cls(
            tag_id=tag_id,
            name=product.name,
            price=product.price,
            category=product.category,
            scanned_at=scanned_at,
        )
