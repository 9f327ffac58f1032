# pos/services/scan_service.py

"""
SCAN SERVICE (TAG TOGGLE)

Purpose:
- Resolve a scanned RFID tag to a catalog product.
- Toggle that product's membership in the target cart.
- Report the action + running totals.

Flow:
1) tag_id required (InvalidInput otherwise)
2) normalize + catalog lookup (UnknownProduct otherwise; no cart touched)
3) get or lazily create the cart (absent/empty cart_id -> default cart)
4) toggle: present -> removed, absent -> added (appended, scan order kept)

Scanning the same tag twice restores the cart's total and item count.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.conf import settings
from django.utils import timezone

from catalog.loader import get_catalog
from catalog.products import Catalog, Product, normalize_tag
from pos.models import Cart, ToggleAction

from .cart_store import CartStore, get_cart_store
from .exceptions import InvalidInput, UnknownProduct

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    action: ToggleAction
    tag_id: str
    product: Product
    cart: Cart

    @property
    def cart_total(self) -> int:
        return self.cart.total

    @property
    def cart_items(self) -> int:
        return self.cart.item_count


def default_cart_id() -> str:
    return getattr(settings, "POS_DEFAULT_CART_ID", "") or "default"


def resolve_cart_id(cart_id) -> str:
    """The given id verbatim; only a missing or empty id means the default cart."""
    if cart_id is None or str(cart_id) == "":
        return default_cart_id()
    return str(cart_id)


def scan_tag(
    *,
    tag_id,
    cart_id=None,
    catalog: Catalog | None = None,
    store: CartStore | None = None,
) -> ScanResult:
    if tag_id is None or str(tag_id) == "":
        raise InvalidInput("tag_id is required")

    if catalog is None:
        catalog = get_catalog()
    if store is None:
        store = get_cart_store()

    normalized = normalize_tag(tag_id)
    product = catalog.get(normalized)

    if product is None:
        logger.warning("Unknown tag scanned", extra={"tag_id": normalized})
        raise UnknownProduct(f"Unknown product: {normalized}")

    cart_id = resolve_cart_id(cart_id)

    with store.lock:
        cart = store.get(cart_id)
        action = cart.toggle(tag_id=normalized, product=product, now=timezone.now())
        snapshot = cart.snapshot()

    logger.info(
        "Tag %s %s cart %s (total=%s, items=%s)",
        normalized,
        action.value,
        cart_id,
        snapshot.total,
        snapshot.item_count,
    )

    return ScanResult(action=action, tag_id=normalized, product=product, cart=snapshot)
