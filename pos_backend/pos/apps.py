"""
PATH: pos/apps.py

POS APP CONFIG

In-memory carts, RFID scan toggling and checkout receipts.
"""

from django.apps import AppConfig


class PosConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pos"
    verbose_name = "Point of Sale"
