# pos/services/cart_store.py

"""
CART STORE

Purpose:
- Own every cart for the lifetime of the process (cart_id -> Cart).
- Create carts lazily on first reference.
- Serialize read-modify-write sequences across request threads.

Rules:
- Callers that mutate a cart hold `store.lock` for the whole check-then-act
  sequence (scan toggle, clear, checkout).
- Carts are never evicted.
"""

from __future__ import annotations

import threading

from pos.models import Cart


class CartStore:
    def __init__(self):
        self._carts: dict[str, Cart] = {}
        # Re-entrant: services hold it while calling get()/clear().
        self.lock = threading.RLock()

    def get(self, cart_id: str) -> Cart:
        """Existing cart, or a fresh empty one registered under cart_id."""
        with self.lock:
            cart = self._carts.get(cart_id)
            if cart is None:
                cart = Cart(id=cart_id)
                self._carts[cart_id] = cart
            return cart

    def peek(self, cart_id: str) -> Cart | None:
        """Lookup without creating."""
        with self.lock:
            return self._carts.get(cart_id)

    def clear(self, cart_id: str) -> Cart:
        """Replace the cart with a fresh empty one (new created_at)."""
        with self.lock:
            cart = Cart(id=cart_id)
            self._carts[cart_id] = cart
            return cart

    def reset(self) -> None:
        """Forget every cart."""
        with self.lock:
            self._carts.clear()

    def __contains__(self, cart_id) -> bool:
        with self.lock:
            return cart_id in self._carts

    def __len__(self) -> int:
        with self.lock:
            return len(self._carts)


_default_store = CartStore()


def get_cart_store() -> CartStore:
    """Process-wide cart store used by the API views."""
    return _default_store
