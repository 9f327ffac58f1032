# pos/views/api.py

"""
POS API VIEWS

Purpose:
- Scan toggle (body or simulated path tag)
- Cart read / clear
- Checkout into a receipt

Hard rules:
- Money is server-owned: prices come from the catalog at scan time.
- Domain errors (POSError) are normalized through error_response().
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiExample,
    OpenApiResponse,
    extend_schema,
    inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from pos.serializers import (
    CartSerializer,
    ReceiptSerializer,
    ScanInputSerializer,
    ScanResultSerializer,
)
from pos.services import (
    InvalidInput,
    POSError,
    checkout_cart,
    clear_cart,
    get_cart,
    scan_tag,
)
from pos.services.scan_service import default_cart_id


# =====================================================
# API ERROR NORMALIZATION
# =====================================================

def error_response(*, code: str, message: str, http_status: int):
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


def pos_error_response(exc: POSError):
    return error_response(code=exc.code, message=str(exc), http_status=exc.http_status)


def _validation_message(errors) -> str:
    """First serializer error as "field: message"."""
    for field, messages in errors.items():
        message = messages[0] if isinstance(messages, list) and messages else messages
        if field == "non_field_errors":
            return str(message)
        return f"{field}: {message}"
    return "Invalid request body"


ERROR_RESPONSE_SCHEMA = inline_serializer(
    name="POSErrorResponse",
    fields={
        "error": inline_serializer(
            name="POSErrorDetail",
            fields={
                "code": serializers.CharField(),
                "message": serializers.CharField(),
            },
        )
    },
)


# =====================================================
# POS API VIEWS
# =====================================================

class ScanView(APIView):
    """
    POST /api/scan

    Toggle the scanned product in the cart: first scan adds, second removes.
    """

    permission_classes = [AllowAny]
    serializer_class = ScanResultSerializer

    @extend_schema(
        tags=["POS"],
        request=ScanInputSerializer,
        responses={
            200: ScanResultSerializer,
            400: OpenApiResponse(ERROR_RESPONSE_SCHEMA, description="tag_id missing"),
            404: OpenApiResponse(ERROR_RESPONSE_SCHEMA, description="Unknown product"),
        },
        examples=[
            OpenApiExample(
                "Scan into a named cart",
                value={"tag_id": "a1b2c3d4", "cart_id": "c1"},
                request_only=True,
            ),
        ],
        description="Scan a tag: adds the product if absent from the cart, removes it if present.",
    )
    def post(self, request):
        serializer = ScanInputSerializer(data=request.data)
        if not serializer.is_valid():
            return pos_error_response(InvalidInput(_validation_message(serializer.errors)))

        try:
            result = scan_tag(
                tag_id=serializer.validated_data.get("tag_id"),
                cart_id=serializer.validated_data.get("cart_id"),
            )
        except POSError as exc:
            return pos_error_response(exc)

        return Response(ScanResultSerializer(result).data, status=status.HTTP_200_OK)


class SimulateScanView(APIView):
    """
    GET /api/simulate/<tag_id>

    Browser-friendly scan into the default cart.
    """

    permission_classes = [AllowAny]
    serializer_class = ScanResultSerializer

    @extend_schema(
        tags=["POS"],
        responses={
            200: ScanResultSerializer,
            404: OpenApiResponse(ERROR_RESPONSE_SCHEMA, description="Unknown product"),
        },
        description="Simulate a scan of the tag in the path against the default cart.",
    )
    def get(self, request, tag_id: str):
        try:
            result = scan_tag(tag_id=tag_id, cart_id=default_cart_id())
        except POSError as exc:
            return pos_error_response(exc)

        return Response(ScanResultSerializer(result).data, status=status.HTTP_200_OK)


class CartDetailView(APIView):
    """
    GET /api/cart/<cart_id>

    Returns the cart, creating an empty one on first reference.
    """

    permission_classes = [AllowAny]
    serializer_class = CartSerializer

    @extend_schema(
        tags=["POS"],
        responses={
            200: inline_serializer(name="CartResponse", fields={"cart": CartSerializer()}),
        },
        description="Get a cart by id (created empty if it does not exist yet).",
    )
    def get(self, request, cart_id: str):
        cart = get_cart(cart_id)
        return Response({"cart": CartSerializer(cart).data}, status=status.HTTP_200_OK)


class ClearCartView(APIView):
    """
    POST /api/cart/<cart_id>/clear
    """

    permission_classes = [AllowAny]
    serializer_class = CartSerializer

    @extend_schema(
        tags=["POS"],
        request=None,
        responses={
            200: inline_serializer(
                name="ClearCartResponse",
                fields={
                    "message": serializers.CharField(),
                    "cart": CartSerializer(),
                },
            ),
        },
        description="Reset the cart to empty.",
    )
    def post(self, request, cart_id: str):
        cart = clear_cart(cart_id)
        return Response(
            {"message": "Cart cleared", "cart": CartSerializer(cart).data},
            status=status.HTTP_200_OK,
        )


class CheckoutCartView(APIView):
    """
    POST /api/cart/<cart_id>/checkout

    Calls:
    - pos.services.checkout_service.checkout_cart()
    """

    permission_classes = [AllowAny]
    serializer_class = ReceiptSerializer

    @extend_schema(
        tags=["POS"],
        request=None,
        responses={
            200: inline_serializer(
                name="CheckoutResponse",
                fields={"receipt": ReceiptSerializer()},
            ),
            400: OpenApiResponse(ERROR_RESPONSE_SCHEMA, description="Cart is empty"),
        },
        description="Finalize the cart into a receipt and reset the cart.",
    )
    def post(self, request, cart_id: str):
        try:
            receipt = checkout_cart(cart_id)
        except POSError as exc:
            return pos_error_response(exc)

        return Response({"receipt": ReceiptSerializer(receipt).data}, status=status.HTTP_200_OK)
