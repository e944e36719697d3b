"""Seed categories and inventory from CSV files under data/."""

from pathlib import Path
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from backoffice.db.models.inventory import Category, InventoryItem
from backoffice.utils.csv_loader import load_categories, load_inventory
from backoffice.utils.logger import get_logger
from backoffice.utils.numbers import to_decimal

logger = get_logger("backoffice.db.seed_data")


def _parse_bool(val: Any, default: bool = True) -> bool:
    if isinstance(val, bool):
        return val
    if isinstance(val, str) and val.strip():
        return val.strip().lower() in ("true", "1", "yes")
    return default


def _parse_int(val: Any) -> int | None:
    try:
        return int(val) if val is not None and str(val).strip() else None
    except (TypeError, ValueError):
        return None


def seed_from_csv(session: Session, data_dir: Path | None = None) -> dict[str, int]:
    """Insert categories then inventory items (category resolved by name). Returns counts inserted."""
    cat_rows = load_categories(data_dir / "categories.csv" if data_dir else None)
    name_to_category: dict[str, Category] = {
        c.name: c for c in session.scalars(select(Category)).all()
    }
    categories_added = 0
    for r in cat_rows:
        name = (r.get("name") or "").strip()
        if not name or name in name_to_category:
            continue
        category = Category(name=name)
        session.add(category)
        name_to_category[name] = category
        categories_added += 1
    session.flush()

    inv_rows = load_inventory(data_dir / "inventory.csv" if data_dir else None)
    items_added = 0
    for r in inv_rows:
        name = (r.get("name") or "").strip()
        if not name:
            continue
        category = name_to_category.get((r.get("category") or "").strip())
        session.add(
            InventoryItem(
                name=name,
                unit=(r.get("unit") or "").strip() or "pcs",
                is_active=_parse_bool(r.get("is_active")),
                category_id=category.id if category else None,
                quantity=to_decimal(r.get("quantity")),
                cost_price=to_decimal(r.get("cost_price"), default=None),
                selling_price=to_decimal(r.get("selling_price"), default=None),
                reorder_level=_parse_int(r.get("reorder_level")),
            )
        )
        items_added += 1
    session.flush()
    logger.info("seed.done", categories=categories_added, inventory=items_added)
    return {"categories": categories_added, "inventory": items_added}
