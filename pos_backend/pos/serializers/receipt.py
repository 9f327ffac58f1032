# pos/serializers/receipt.py

"""
RECEIPT SERIALIZER
"""

from rest_framework import serializers

from .cart_item import CartItemSerializer


class ReceiptSerializer(serializers.Serializer):
    receiptId = serializers.CharField(source="receipt_id", read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    total = serializers.IntegerField(read_only=True)
    itemCount = serializers.IntegerField(source="item_count", read_only=True)
    checkoutTime = serializers.DateTimeField(source="checkout_time", read_only=True)
