# pos/services/cart_service.py

"""
CART SERVICE

Read + clear for a single cart. Both paths create the cart if it is missing;
neither can fail.
"""

from __future__ import annotations

import logging

from pos.models import Cart

from .cart_store import CartStore, get_cart_store

logger = logging.getLogger(__name__)


def get_cart(cart_id: str, *, store: CartStore | None = None) -> Cart:
    """Existing cart or a newly created empty one (side-effecting read)."""
    if store is None:
        store = get_cart_store()
    with store.lock:
        return store.get(cart_id).snapshot()


def clear_cart(cart_id: str, *, store: CartStore | None = None) -> Cart:
    """Unconditionally reset the cart; clearing an unknown cart creates it."""
    if store is None:
        store = get_cart_store()
    with store.lock:
        cart = store.clear(cart_id).snapshot()

    logger.info("Cart cleared", extra={"cart_id": cart_id})
    return cart
