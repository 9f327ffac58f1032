# catalog/views.py
"""
CATALOG VIEWS

GET /api/products

Rules:
- AllowAny (public)
- Returns the full catalog keyed by normalized tag
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.loader import get_catalog


class ProductSerializer(serializers.Serializer):
    name = serializers.CharField()
    price = serializers.IntegerField()
    category = serializers.CharField()


class ProductListView(APIView):
    """
    GET /api/products
    """

    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Catalog"],
        responses={
            200: inline_serializer(
                name="ProductCatalogResponse",
                fields={
                    "products": serializers.DictField(child=ProductSerializer()),
                },
            )
        },
        description="Full product catalog keyed by normalized tag identifier.",
    )
    def get(self, request, *args, **kwargs):
        catalog = get_catalog()
        return Response({"products": catalog.as_dict()}, status=status.HTTP_200_OK)
