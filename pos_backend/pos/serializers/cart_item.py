"""
PATH: pos/serializers/cart_item.py

CART ITEM SERIALIZER

Output only. Field names follow the device/harness wire format
(tag_id, name, price, category, scannedAt).
"""

from rest_framework import serializers


class CartItemSerializer(serializers.Serializer):
    tag_id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.IntegerField(read_only=True)
    category = serializers.CharField(read_only=True)
    scannedAt = serializers.DateTimeField(source="scanned_at", read_only=True)
