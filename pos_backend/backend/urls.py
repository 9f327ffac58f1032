# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/ and match with or without a trailing slash
(RFID readers post to "/api/scan", browsers often add the slash).

- /api/health        liveness probe
- /api/products      catalog (catalog app)
- /api/scan ...      carts, scanning, checkout (pos app)
- /api/schema/       OpenAPI schema
- /api/docs/         Swagger UI
"""

from __future__ import annotations

from django.urls import include, path, re_path
from django.utils import timezone
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


# ------------------ HEALTH CHECK (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "timestamp": {"type": "string", "format": "date-time"},
            },
        }
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    Minimal operational endpoint: confirms the app is responding.
    """
    return Response({"status": "ok", "timestamp": timezone.now()})


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    re_path(r"^health/?$", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # App modules
    path("", include("catalog.urls")),
    path("", include("pos.urls")),
]

urlpatterns = [
    # Root convenience: visiting / takes you to Swagger docs
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]
