"""
PATH: pos/urls.py

POS URLS

Purpose:
- Tag scanning (POST body + GET simulation)
- Cart read / clear
- Cart checkout (finalizes to Receipt)

Every route matches with or without a trailing slash.
"""

from django.urls import re_path

from pos.views.api import (
    CartDetailView,
    CheckoutCartView,
    ClearCartView,
    ScanView,
    SimulateScanView,
)

app_name = "pos"

urlpatterns = [
    re_path(r"^scan/?$", ScanView.as_view(), name="scan"),
    re_path(r"^simulate/(?P<tag_id>[^/]+)/?$", SimulateScanView.as_view(), name="simulate"),

    re_path(r"^cart/(?P<cart_id>[^/]+)/clear/?$", ClearCartView.as_view(), name="clear-cart"),
    re_path(r"^cart/(?P<cart_id>[^/]+)/checkout/?$", CheckoutCartView.as_view(), name="checkout"),
    re_path(r"^cart/(?P<cart_id>[^/]+)/?$", CartDetailView.as_view(), name="cart-detail"),
]
