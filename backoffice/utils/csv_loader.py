"""Load seed data from CSV files."""

import csv
from pathlib import Path
from typing import Any

from backoffice.config import DATA_DIR


def _read_csv(path: Path) -> list[dict[str, Any]]:
    """Read a CSV file and return list of row dicts."""
    if not path.exists():
        return []
    with path.open("r", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        return list(reader)


def load_categories(csv_path: Path | None = None) -> list[dict[str, Any]]:
    """Load categories from categories.csv."""
    path = csv_path or DATA_DIR / "categories.csv"
    return _read_csv(path)


def load_inventory(csv_path: Path | None = None) -> list[dict[str, Any]]:
    """Load inventory items from inventory.csv."""
    path = csv_path or DATA_DIR / "inventory.csv"
    return _read_csv(path)
