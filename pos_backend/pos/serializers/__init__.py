from .cart import CartSerializer
from .cart_item import CartItemSerializer
from .receipt import ReceiptSerializer
from .scan import ScanInputSerializer, ScanResultSerializer

__all__ = [
    "CartItemSerializer",
    "CartSerializer",
    "ReceiptSerializer",
    "ScanInputSerializer",
    "ScanResultSerializer",
]
