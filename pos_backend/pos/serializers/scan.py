# pos/serializers/scan.py

"""
SCAN SERIALIZERS

Input:
- tag_id: optional at the serializer level; presence is enforced by the
  scan service so a missing tag surfaces as INVALID_INPUT.
  Numbers are accepted and read as strings (some readers send 11223344 unquoted).
- cart_id: optional, used verbatim (same id as the /api/cart/<cart_id> path);
  missing or empty means the configured default cart.

Output:
- {action, product, price, cart_total, cart_items, cart}
"""

from rest_framework import serializers

from .cart import CartSerializer


class ScanInputSerializer(serializers.Serializer):
    tag_id = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )
    cart_id = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
    )


class ScanResultSerializer(serializers.Serializer):
    action = serializers.CharField(source="action.value", read_only=True)
    product = serializers.CharField(source="product.name", read_only=True)
    price = serializers.IntegerField(source="product.price", read_only=True)
    cart_total = serializers.IntegerField(read_only=True)
    cart_items = serializers.IntegerField(read_only=True)
    cart = CartSerializer(read_only=True)
