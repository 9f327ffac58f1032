# backend/settings/test.py
"""
PATH: backend/settings/test.py

TEST SETTINGS
Built-in catalog only, quiet POS loggers.
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import LOGGING

DEBUG = False
ALLOWED_HOSTS = ["*"]

CORS_ALLOW_ALL_ORIGINS = True

POS_CATALOG_CSV = ""
POS_DEFAULT_CART_ID = "default"
POS_RECEIPT_PREFIX = "RCP"

LOGGING["loggers"]["catalog"]["level"] = "WARNING"
LOGGING["loggers"]["pos"]["level"] = "WARNING"
