# pos/services/checkout_service.py

"""
CHECKOUT SERVICE

Purpose:
- Finalize a cart into an immutable Receipt.
- Reset the cart to empty (same semantics as clear).

Hard rules:
- Empty cart -> EmptyCart, nothing changes.
- Snapshot + reset happen under the store lock, so no scan can land between them.

Receipt ids:
- "<prefix>-<epoch ms>-<sequence>" where sequence is a process-wide counter.
  Two checkouts inside the same millisecond still get distinct ids.
"""

from __future__ import annotations

import itertools
import logging

from django.conf import settings
from django.utils import timezone

from pos.models import Receipt

from .cart_store import CartStore, get_cart_store
from .exceptions import EmptyCart

logger = logging.getLogger(__name__)

_receipt_sequence = itertools.count(1)


def next_receipt_id(now=None) -> str:
    now = now or timezone.now()
    prefix = getattr(settings, "POS_RECEIPT_PREFIX", "") or "RCP"
    millis = int(now.timestamp() * 1000)
    return f"{prefix}-{millis}-{next(_receipt_sequence):04d}"


def checkout_cart(cart_id: str, *, store: CartStore | None = None) -> Receipt:
    if store is None:
        store = get_cart_store()

    with store.lock:
        cart = store.get(cart_id)

        if cart.is_empty:
            logger.warning("Checkout on empty cart", extra={"cart_id": cart_id})
            raise EmptyCart("Cart is empty")

        now = timezone.now()
        receipt = Receipt(
            receipt_id=next_receipt_id(now),
            items=tuple(cart.items),
            total=cart.total,
            checkout_time=now,
        )
        store.clear(cart_id)

    logger.info(
        "Checkout %s for cart %s: %s items, total %s",
        receipt.receipt_id,
        cart_id,
        receipt.item_count,
        receipt.total,
    )
    return receipt
