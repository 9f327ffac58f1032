from .cart_store import CartStore, get_cart_store
from .cart_service import clear_cart, get_cart
from .checkout_service import checkout_cart, next_receipt_id
from .exceptions import EmptyCart, InvalidInput, POSError, UnknownProduct
from .scan_service import ScanResult, scan_tag

__all__ = [
    "CartStore",
    "EmptyCart",
    "InvalidInput",
    "POSError",
    "ScanResult",
    "UnknownProduct",
    "checkout_cart",
    "clear_cart",
    "get_cart",
    "get_cart_store",
    "next_receipt_id",
    "scan_tag",
]
