# pos/services/exceptions.py

"""
POS SERVICE ERRORS

Centralized domain errors for scanning and checkout.
Each error carries the API error code and HTTP status it surfaces as.
"""


class POSError(Exception):
    """Base exception for all POS service failures."""

    code = "POS_ERROR"
    http_status = 400


class InvalidInput(POSError):
    """Raised when a required field (e.g. tag_id) is absent or empty."""

    code = "INVALID_INPUT"
    http_status = 400


class UnknownProduct(POSError):
    """Raised when a normalized tag is not in the catalog."""

    code = "UNKNOWN_PRODUCT"
    http_status = 404


class EmptyCart(POSError):
    """Raised on checkout of a cart with no items."""

    code = "EMPTY_CART"
    http_status = 400
