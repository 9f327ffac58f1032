"""
PATH: pos/models/receipt.py

RECEIPT

Immutable snapshot of a cart at checkout time.
Returned to the caller only; the server keeps no copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .cart_item import CartItem


@dataclass(frozen=True)
class Receipt:
    receipt_id: str
    items: tuple[CartItem, ...]
    total: int
    checkout_time: datetime

    @property
    def item_count(self) -> int:
        return len(self.items)
