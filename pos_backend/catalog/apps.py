# catalog/apps.py

"""
CATALOG APP CONFIG

Read-only product catalog keyed by normalized RFID tag.
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "Product Catalog"
