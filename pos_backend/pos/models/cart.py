"""
PATH: pos/models/cart.py

CART

Purpose:
- Server-held, mutable cart: ordered items (scan order) + running total.
- Scan toggling is an explicit two-state transition per (cart, tag):
  ABSENT --scan--> PRESENT --scan--> ABSENT

Rules:
- A tag occupies at most one slot in a cart.
- total == sum(item.price for item in items) after every mutation.
- Carts are reset (replaced by a fresh empty cart), never deleted.

Carts are plain in-memory objects owned by pos.services.cart_store.CartStore;
callers mutate them only while holding the store lock.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from django.utils import timezone

from catalog.products import Product

from .cart_item import CartItem


class ToggleAction(str, Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass
class Cart:
    id: str
    items: list[CartItem] = field(default_factory=list)
    total: int = 0
    created_at: datetime = field(default_factory=timezone.now)

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def index_of(self, tag_id: str) -> int | None:
        """Position of the item for tag_id (first match), or None."""
        for idx, item in enumerate(self.items):
            if item.tag_id == tag_id:
                return idx
        return None

    def toggle(self, *, tag_id: str, product: Product, now: datetime | None = None) -> ToggleAction:
        """
        Flip membership of tag_id.

        PRESENT -> remove that single entry, subtract the product price.
        ABSENT  -> append a new item at the end, add the product price.
        """
        idx = self.index_of(tag_id)

        if idx is not None:
            del self.items[idx]
            self.total -= product.price
            return ToggleAction.REMOVED

        self.items.append(
            CartItem.from_product(
                tag_id=tag_id,
                product=product,
                scanned_at=now or timezone.now(),
            )
        )
        self.total += product.price
        return ToggleAction.ADDED

    def snapshot(self) -> "Cart":
        """Detached copy, safe to serialize after the store lock is released."""
        return replace(self, items=list(self.items))

    def __str__(self):
        return f"Cart {self.id} ({self.item_count} items, total {self.total})"
