"""Tests for inventory/category repositories and CSV seeding."""

import tempfile
import unittest
from datetime import date
from pathlib import Path

from backoffice.auth.context import UserContext
from backoffice.db import get_session, reset_db
from backoffice.db.repositories import category_repo, inventory_repo
from backoffice.db.seed_data import seed_from_csv
from backoffice.errors import ConflictError, NotFoundError, ReferencedDataError, ValidationError
from backoffice.services import daily_stock

CLI_ADMIN = UserContext(user_id=None, username="test", role="admin")


class TestInventoryRepo(unittest.TestCase):
    def setUp(self):
        reset_db()

    def test_crud(self):
        bar = category_repo.create_category("Bar")
        item = inventory_repo.create_item(
            name="Gin", unit="bottle", category_id=bar["id"], quantity="4", cost_price=12.5, reorder_level=2
        )
        self.assertEqual(item["quantity"], "4.00")
        self.assertEqual(item["cost_price"], "12.50")
        self.assertIsNone(item["selling_price"])
        self.assertTrue(item["is_active"])

        updated = inventory_repo.update_item(item["id"], is_active=False, selling_price="30")
        self.assertFalse(updated["is_active"])
        self.assertEqual(updated["selling_price"], "30.00")
        self.assertEqual(updated["unit"], "bottle")

        self.assertEqual(inventory_repo.list_items(active_only=True), [])
        self.assertEqual(len(inventory_repo.list_items()), 1)

        inventory_repo.delete_item(item["id"])
        with self.assertRaises(NotFoundError):
            inventory_repo.get_item(item["id"])

    def test_validation(self):
        with self.assertRaises(ValidationError):
            inventory_repo.create_item(name="  ")
        with self.assertRaises(ValidationError) as ctx:
            inventory_repo.create_item(name="Too much", quantity="1e30")
        self.assertEqual(ctx.exception.field, "quantity")
        with self.assertRaises(ValidationError) as ctx:
            inventory_repo.create_item(name="Ghost", category_id=404)
        self.assertEqual(ctx.exception.field, "category_id")
        with self.assertRaises(NotFoundError):
            inventory_repo.update_item(404, name="x")

    def test_referenced_item_cannot_be_deleted(self):
        item = inventory_repo.create_item(name="Tea")
        daily_stock.create_record(CLI_ADMIN, date(2026, 10, 1))
        with self.assertRaises(ReferencedDataError) as ctx:
            inventory_repo.delete_item(item["id"])
        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(inventory_repo.get_item(item["id"])["name"], "Tea")

    def test_duplicate_category(self):
        category_repo.create_category("Bar")
        with self.assertRaises(ConflictError):
            category_repo.create_category("Bar")
        self.assertEqual([c["name"] for c in category_repo.list_categories()], ["Bar"])


class TestSeedFromCsv(unittest.TestCase):
    def setUp(self):
        reset_db()

    def test_seed_resolves_categories(self):
        with tempfile.TemporaryDirectory() as tmp:
            d = Path(tmp)
            (d / "categories.csv").write_text("name\nBar\nKitchen\n", encoding="utf-8")
            (d / "inventory.csv").write_text(
                "name,category,unit,quantity,cost_price,selling_price,reorder_level,is_active\n"
                "Gin,Bar,bottle,3,10.00,25.00,2,true\n"
                "Flour,Kitchen,kg,,1.1,,,\n"
                "Old Gin,Bar,,0,,,,false\n",
                encoding="utf-8",
            )
            with get_session() as session:
                counts = seed_from_csv(session, data_dir=d)
            self.assertEqual(counts, {"categories": 2, "inventory": 3})

            # categories already present are not inserted twice
            with get_session() as session:
                again = seed_from_csv(session, data_dir=d)
            self.assertEqual(again["categories"], 0)

        items = {i["name"]: i for i in inventory_repo.list_items()}
        self.assertEqual(items["Gin"]["quantity"], "3.00")
        self.assertEqual(items["Gin"]["reorder_level"], 2)
        self.assertEqual(items["Flour"]["quantity"], "0.00")
        self.assertTrue(items["Flour"]["is_active"])
        self.assertEqual(items["Old Gin"]["unit"], "pcs")
        self.assertFalse(items["Old Gin"]["is_active"])
        cats = {c["name"]: c["id"] for c in category_repo.list_categories()}
        self.assertEqual(items["Gin"]["category_id"], cats["Bar"])

    def test_missing_files_seed_nothing(self):
        with tempfile.TemporaryDirectory() as tmp, get_session() as session:
            self.assertEqual(seed_from_csv(session, data_dir=Path(tmp)), {"categories": 0, "inventory": 0})


if __name__ == "__main__":
    unittest.main()
