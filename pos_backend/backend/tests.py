# backend/tests.py

import importlib
import os
from unittest import mock

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase
from rest_framework.test import APIClient


class ApiDocsTests(SimpleTestCase):
    def setUp(self):
        self.client = APIClient()

    def test_schema_lists_pos_routes(self):
        res = self.client.get("/api/schema/", HTTP_ACCEPT="application/vnd.oai.openapi+json")

        self.assertEqual(res.status_code, 200)
        paths = [p.rstrip("/") for p in res.json()["paths"]]
        self.assertIn("/api/scan", paths)
        self.assertIn("/api/products", paths)
        self.assertIn("/api/cart/{cart_id}/checkout", paths)

    def test_root_redirects_to_docs(self):
        res = self.client.get("/")

        self.assertEqual(res.status_code, 302)
        self.assertEqual(res["Location"], "/api/docs/")


class ProdSettingsTests(SimpleTestCase):
    """Production settings must fail closed."""

    def _load_prod(self):
        import backend.settings.prod as prod

        return importlib.reload(prod)

    def test_missing_secret_key_is_rejected(self):
        with mock.patch.dict(os.environ, {"SECRET_KEY": "", "ALLOWED_HOSTS": "pos.example.com"}):
            with self.assertRaises(ImproperlyConfigured):
                self._load_prod()

    def test_missing_allowed_hosts_is_rejected(self):
        with mock.patch.dict(os.environ, {"SECRET_KEY": "s3cr3t-value", "ALLOWED_HOSTS": ""}):
            with self.assertRaises(ImproperlyConfigured):
                self._load_prod()
