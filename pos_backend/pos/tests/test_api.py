# pos/tests/test_api.py

"""
POS API TESTS

End-to-end through URL routing, serializers and the process cart store.
The process store is reset before every test.
"""

from __future__ import annotations

from django.test import SimpleTestCase
from rest_framework.test import APIClient

from pos.services import get_cart_store


class POSApiTestCase(SimpleTestCase):
    def setUp(self):
        self.client = APIClient()
        get_cart_store().reset()
        self.addCleanup(get_cart_store().reset)

    def scan(self, tag_id, cart_id=None):
        payload = {"tag_id": tag_id}
        if cart_id is not None:
            payload["cart_id"] = cart_id
        return self.client.post("/api/scan", payload, format="json")

    def cart(self, cart_id):
        return self.client.get(f"/api/cart/{cart_id}").json()["cart"]

    def assertCartConsistent(self, cart):
        self.assertEqual(cart["total"], sum(item["price"] for item in cart["items"]))


class HealthApiTests(POSApiTestCase):
    def test_health(self):
        res = self.client.get("/api/health")

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["status"], "ok")
        self.assertTrue(body["timestamp"])


class ScanApiTests(POSApiTestCase):
    def test_scan_toggle_example(self):
        res = self.scan("a1b2c3d4", "c1")

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["action"], "added")
        self.assertEqual(body["product"], "Milk (1L)")
        self.assertEqual(body["price"], 40)
        self.assertEqual(body["cart_total"], 40)
        self.assertEqual(body["cart_items"], 1)

        cart = body["cart"]
        self.assertEqual(cart["id"], "c1")
        self.assertEqual(cart["total"], 40)
        self.assertIn("createdAt", cart)
        self.assertEqual(
            {k: cart["items"][0][k] for k in ("tag_id", "name", "price", "category")},
            {"tag_id": "A1B2C3D4", "name": "Milk (1L)", "price": 40, "category": "Dairy"},
        )
        self.assertIn("scannedAt", cart["items"][0])

        res = self.scan("a1b2c3d4", "c1")

        body = res.json()
        self.assertEqual(body["action"], "removed")
        self.assertEqual(body["cart_total"], 0)
        self.assertEqual(body["cart_items"], 0)
        self.assertEqual(body["cart"]["items"], [])

    def test_cart_defaults_to_default(self):
        self.scan("DEADBEEF")

        self.assertEqual(self.cart("default")["total"], 80)

    def test_numeric_tag_is_accepted(self):
        res = self.client.post("/api/scan", {"tag_id": 11223344, "cart_id": "c1"}, format="json")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["product"], "Bread (White)")

    def test_missing_tag_is_400(self):
        for payload in ({}, {"tag_id": ""}, {"tag_id": None}, {"cart_id": "c1"}):
            res = self.client.post("/api/scan", payload, format="json")
            self.assertEqual(res.status_code, 400, payload)
            self.assertEqual(res.json()["error"]["code"], "INVALID_INPUT")

    def test_unknown_tag_is_404_and_leaves_cart(self):
        self.scan("A1B2C3D4", "c1")
        before = self.cart("c1")

        res = self.scan("ZZZZZZZZ", "c1")

        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["error"]["code"], "UNKNOWN_PRODUCT")
        self.assertEqual(self.cart("c1"), before)
        self.assertIsNone(get_cart_store().peek("other"))

    def test_total_consistent_after_every_scan(self):
        for tag in ["A1B2C3D4", "11223344", "A1B2C3D4", "55667788", "F00DCAFE", "11223344"]:
            cart = self.scan(tag, "c1").json()["cart"]
            self.assertCartConsistent(cart)

    def test_trailing_slash_is_accepted(self):
        res = self.client.post("/api/scan/", {"tag_id": "A1B2C3D4"}, format="json")
        self.assertEqual(res.status_code, 200)

    def test_padded_cart_id_matches_cart_path(self):
        """Body cart_id and the /api/cart/<id> path name the same cart, byte for byte."""
        self.scan("A1B2C3D4", " c1 ")

        self.assertEqual(self.client.get("/api/cart/%20c1%20").json()["cart"]["total"], 40)
        self.assertIsNone(get_cart_store().peek("c1"))

        res = self.client.post("/api/cart/%20c1%20/checkout")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["receipt"]["total"], 40)

    def test_wrong_field_types_use_error_shape(self):
        for payload in ({"tag_id": True}, {"tag_id": []}, {"tag_id": "A1B2C3D4", "cart_id": {"id": 1}}):
            res = self.client.post("/api/scan", payload, format="json")

            self.assertEqual(res.status_code, 400, payload)
            self.assertEqual(res.json()["error"]["code"], "INVALID_INPUT")

        self.assertEqual(len(get_cart_store()), 0)

    def test_non_object_body_uses_error_shape(self):
        res = self.client.post("/api/scan", ["A1B2C3D4"], format="json")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"]["code"], "INVALID_INPUT")


class SimulateApiTests(POSApiTestCase):
    def test_simulate_toggles_default_cart(self):
        res = self.client.get("/api/simulate/cafebabe")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["action"], "added")
        self.assertEqual(self.cart("default")["total"], 25)

        res = self.client.get("/api/simulate/CAFEBABE")
        self.assertEqual(res.json()["action"], "removed")
        self.assertEqual(self.cart("default")["total"], 0)

    def test_simulate_unknown_is_404(self):
        res = self.client.get("/api/simulate/ZZZZZZZZ")

        self.assertEqual(res.status_code, 404)
        self.assertIsNone(get_cart_store().peek("default"))


class CartApiTests(POSApiTestCase):
    def test_get_creates_empty_cart(self):
        cart = self.cart("new-cart")

        self.assertEqual(cart["id"], "new-cart")
        self.assertEqual(cart["items"], [])
        self.assertEqual(cart["total"], 0)

    def test_clear_always_yields_empty_cart(self):
        self.scan("A1B2C3D4", "c1")
        self.scan("AABBCCDD", "c1")

        for cart_id in ("c1", "never-used"):
            res = self.client.post(f"/api/cart/{cart_id}/clear")

            self.assertEqual(res.status_code, 200)
            body = res.json()
            self.assertEqual(body["message"], "Cart cleared")
            self.assertEqual(body["cart"]["items"], [])
            self.assertEqual(body["cart"]["total"], 0)

        self.assertEqual(self.cart("c1")["total"], 0)


class CheckoutApiTests(POSApiTestCase):
    def test_checkout_returns_receipt_and_empties_cart(self):
        self.scan("A1B2C3D4", "c1")
        self.scan("99887766", "c1")
        before = self.cart("c1")

        res = self.client.post("/api/cart/c1/checkout")

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(set(body), {"receipt"})

        receipt = body["receipt"]
        self.assertTrue(receipt["receiptId"].startswith("RCP-"))
        self.assertEqual(receipt["total"], before["total"])
        self.assertEqual(receipt["total"], 95)
        self.assertEqual(receipt["itemCount"], 2)
        self.assertEqual(receipt["items"], before["items"])
        self.assertIn("checkoutTime", receipt)

        after = self.cart("c1")
        self.assertEqual(after["items"], [])
        self.assertEqual(after["total"], 0)

    def test_checkout_empty_cart_is_400(self):
        before = self.cart("c1")

        res = self.client.post("/api/cart/c1/checkout")

        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"]["code"], "EMPTY_CART")
        self.assertEqual(self.cart("c1"), before)

    def test_receipt_ids_are_unique(self):
        ids = set()
        for _ in range(5):
            self.scan("A1B2C3D4", "c1")
            ids.add(self.client.post("/api/cart/c1/checkout").json()["receipt"]["receiptId"])

        self.assertEqual(len(ids), 5)


class CorsTests(POSApiTestCase):
    def test_any_origin_is_allowed(self):
        res = self.client.get("/api/products", HTTP_ORIGIN="http://reader.local:8080")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res["Access-Control-Allow-Origin"], "*")

    def test_preflight_is_answered(self):
        res = self.client.options(
            "/api/scan",
            HTTP_ORIGIN="http://reader.local:8080",
            HTTP_ACCESS_CONTROL_REQUEST_METHOD="POST",
            HTTP_ACCESS_CONTROL_REQUEST_HEADERS="content-type",
        )

        self.assertEqual(res.status_code, 200)
        self.assertIn("POST", res["Access-Control-Allow-Methods"])
