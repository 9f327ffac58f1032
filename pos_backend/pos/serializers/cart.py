# pos/serializers/cart.py

"""
CART SERIALIZER

Purpose:
- Return a cart in the shape scanning clients expect: {id, items, total, createdAt}.
- total is the server-side running total (never trusted from client).
"""

from rest_framework import serializers

from .cart_item import CartItemSerializer


class CartSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    total = serializers.IntegerField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
