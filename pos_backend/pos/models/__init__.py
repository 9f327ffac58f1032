from .cart import Cart, ToggleAction
from .cart_item import CartItem
from .receipt import Receipt

__all__ = ["Cart", "CartItem", "Receipt", "ToggleAction"]
