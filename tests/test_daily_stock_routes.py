"""HTTP tests for the daily stock API (status codes, error bodies, role checks)."""

import unittest

from fastapi.testclient import TestClient

from backoffice.api import create_app
from backoffice.auth.context import Role
from backoffice.db import reset_db
from backoffice.db.repositories import inventory_repo, user_repo


class DailyStockRoutesTest(unittest.TestCase):
    def setUp(self):
        reset_db()
        self.client = TestClient(create_app())
        user_repo.create_user("admin", "admin-pw", Role.ADMIN)
        user_repo.create_user("staff", "staff-pw", Role.STAFF)
        self.admin_headers = self._login("admin", "admin-pw")
        self.staff_headers = self._login("staff", "staff-pw")
        self.cola = inventory_repo.create_item(name="Cola", unit="can")
        inventory_repo.create_item(name="Ale", unit="bottle")

    def _login(self, username: str, password: str) -> dict[str, str]:
        resp = self.client.post("/api/auth/login", json={"username": username, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    def _create(self, record_date: str = "2026-10-01", headers=None) -> dict:
        resp = self.client.post(
            "/api/daily-stock",
            json={"record_date": record_date, "notes": "opening"},
            headers=headers or self.staff_headers,
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def test_health(self):
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_requires_token(self):
        resp = self.client.get("/api/daily-stock")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.json()["code"], "AUTHENTICATION_REQUIRED")

        resp = self.client.get("/api/daily-stock", headers={"Authorization": "Bearer not-a-jwt"})
        self.assertEqual(resp.status_code, 401)

    def test_create_and_duplicate(self):
        record = self._create()
        self.assertEqual(record["record_date"], "2026-10-01")
        self.assertFalse(record["is_finalized"])

        resp = self.client.post("/api/daily-stock", json={"record_date": "2026-10-01"}, headers=self.admin_headers)
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["code"], "CONFLICT")

        listed = self.client.get(
            "/api/daily-stock", params={"date_filter": "2026-10-01"}, headers=self.staff_headers
        ).json()
        self.assertEqual(len(listed), 1)

    def test_create_without_date(self):
        resp = self.client.post("/api/daily-stock", json={}, headers=self.staff_headers)
        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertEqual(body["code"], "VALIDATION_ERROR")
        self.assertEqual(body["field"], "record_date")

    def test_get_record_and_item(self):
        record = self._create()
        resp = self.client.get(f"/api/daily-stock/{record['id']}", headers=self.staff_headers)
        self.assertEqual(resp.status_code, 200)
        items = resp.json()["items"]
        self.assertEqual([i["inventory_item_name"] for i in items], ["Ale", "Cola"])

        resp = self.client.get(f"/api/daily-stock/items/{items[1]['id']}", headers=self.staff_headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["inventory_item_id"], self.cola["id"])

        self.assertEqual(self.client.get("/api/daily-stock/9999", headers=self.staff_headers).status_code, 404)

    def test_batch_update_recomputes(self):
        record = self._create()
        items = self.client.get(f"/api/daily-stock/{record['id']}", headers=self.staff_headers).json()["items"]
        line = dict(items[0])
        line.update(
            opening_stock="12.50",
            items_received="3.25",
            items_sold_manual="4.10",
            items_taken_wasted="0.15",
            closing_stock_actual="11.00",
            variance="0.00",
        )
        resp = self.client.put(f"/api/daily-stock/{record['id']}/items", json=[line], headers=self.staff_headers)
        self.assertEqual(resp.status_code, 200, resp.text)
        (updated,) = resp.json()
        self.assertEqual(updated["closing_stock_calculated"], "11.50")
        self.assertEqual(updated["variance"], "-0.50")

    def test_batch_update_validation(self):
        record = self._create()
        resp = self.client.put(f"/api/daily-stock/{record['id']}/items", json=[], headers=self.staff_headers)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["field"], "items")

        items = self.client.get(f"/api/daily-stock/{record['id']}", headers=self.staff_headers).json()["items"]
        broken = dict(items[0])
        del broken["items_received"]
        resp = self.client.put(
            f"/api/daily-stock/{record['id']}/items", json=[items[1], broken], headers=self.staff_headers
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["field"], "items_received")

    def test_oversized_quantity_is_json_400(self):
        record = self._create()
        items = self.client.get(f"/api/daily-stock/{record['id']}", headers=self.staff_headers).json()["items"]
        for value in ("1e30", "12345678901234"):
            line = dict(items[0], items_received=value)
            resp = self.client.put(
                f"/api/daily-stock/{record['id']}/items", json=[line], headers=self.staff_headers
            )
            self.assertEqual(resp.status_code, 400, resp.text)
            self.assertEqual(resp.json()["code"], "VALIDATION_ERROR")
            self.assertEqual(resp.json()["field"], "items_received")

        resp = self.client.post(
            "/api/inventory", json={"name": "Huge", "quantity": "1e30"}, headers=self.admin_headers
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["field"], "quantity")

    def test_finalize_roles(self):
        record = self._create()
        url = f"/api/daily-stock/{record['id']}"

        resp = self.client.put(url, json={"is_finalized": True}, headers=self.staff_headers)
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["code"], "FORBIDDEN")

        resp = self.client.put(url, json={"is_finalized": True}, headers=self.admin_headers)
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["is_finalized"])

        resp = self.client.put(url, json={"notes": "too late"}, headers=self.staff_headers)
        self.assertEqual(resp.status_code, 403)

        resp = self.client.put(url, json={}, headers=self.admin_headers)
        self.assertEqual(resp.status_code, 400)

    def test_delete_admin_only(self):
        record = self._create()
        url = f"/api/daily-stock/{record['id']}"
        self.assertEqual(self.client.delete(url, headers=self.staff_headers).status_code, 403)

        resp = self.client.delete(url, headers=self.admin_headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["id"], record["id"])
        self.assertEqual(self.client.get(url, headers=self.admin_headers).status_code, 404)
        self.assertEqual(self.client.delete(url, headers=self.admin_headers).status_code, 404)


if __name__ == "__main__":
    unittest.main()
