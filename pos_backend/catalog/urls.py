"""
PATH: catalog/urls.py

CATALOG URLS
"""

from django.urls import re_path

from catalog.views import ProductListView

app_name = "catalog"

urlpatterns = [
    re_path(r"^products/?$", ProductListView.as_view(), name="product-list"),
]
