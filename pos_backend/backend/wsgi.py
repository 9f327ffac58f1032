# backend/wsgi.py
"""
WSGI config for the POS simulator.
Defaults to dev settings unless DJANGO_SETTINGS_MODULE is set externally.

Carts live in this process's memory: run a single worker process
(threads are fine, the cart store is locked).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings.dev")

application = get_wsgi_application()
