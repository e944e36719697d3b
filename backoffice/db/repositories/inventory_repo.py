"""Inventory repository: CRUD over the inventory table, returning JSON-shaped dicts."""

from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backoffice.db import get_session
from backoffice.db.models.inventory import Category, InventoryItem
from backoffice.db.repositories.common import clean_fields, reject_nulls
from backoffice.errors import NotFoundError, ReferencedDataError, ValidationError
from backoffice.utils.logger import get_logger
from backoffice.utils.numbers import format_quantity

logger = get_logger("backoffice.db.inventory_repo")

_FIELDS = {
    "name",
    "unit",
    "is_active",
    "category_id",
    "quantity",
    "cost_price",
    "selling_price",
    "reorder_level",
}
_DECIMAL_FIELDS = ("quantity", "cost_price", "selling_price")


def item_to_dict(item: InventoryItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "unit": item.unit,
        "is_active": item.is_active,
        "category_id": item.category_id,
        "quantity": format_quantity(item.quantity),
        "cost_price": format_quantity(item.cost_price),
        "selling_price": format_quantity(item.selling_price),
        "reorder_level": item.reorder_level,
    }


def _check_category(session: Session, category_id: Optional[int]) -> None:
    if category_id is not None and session.get(Category, category_id) is None:
        raise ValidationError(f"Category {category_id} does not exist.", field="category_id")


def list_items(active_only: bool = False) -> list[dict[str, Any]]:
    with get_session() as session:
        q = select(InventoryItem)
        if active_only:
            q = q.where(InventoryItem.is_active.is_(True))
        q = q.order_by(InventoryItem.id.asc())
        return [item_to_dict(i) for i in session.scalars(q).all()]


def get_item(item_id: int) -> dict[str, Any]:
    with get_session() as session:
        item = session.get(InventoryItem, item_id)
        if item is None:
            raise NotFoundError("Item not found")
        return item_to_dict(item)


def create_item(**fields: Any) -> dict[str, Any]:
    """Insert an inventory item; unknown keys are ignored."""
    values = clean_fields(fields, _FIELDS, _DECIMAL_FIELDS)
    if not (values.get("name") or "").strip():
        raise ValidationError("name is required.", field="name")
    with get_session() as session:
        _check_category(session, values.get("category_id"))
        item = InventoryItem(**values)
        session.add(item)
        session.flush()
        logger.info("inventory.create", item_id=item.id, name=item.name)
        return item_to_dict(item)


def update_item(item_id: int, **fields: Any) -> dict[str, Any]:
    """Apply the supplied fields only."""
    values = clean_fields(fields, _FIELDS, _DECIMAL_FIELDS)
    reject_nulls(values, ("name", "unit", "is_active", "quantity"))
    with get_session() as session:
        item = session.get(InventoryItem, item_id)
        if item is None:
            raise NotFoundError("Item not found")
        if "category_id" in values:
            _check_category(session, values["category_id"])
        for key, value in values.items():
            setattr(item, key, value)
        session.flush()
        logger.info("inventory.update", item_id=item_id, fields=sorted(values))
        return item_to_dict(item)


def delete_item(item_id: int) -> None:
    """Delete an item. Items referenced by daily stock lines cannot be deleted; deactivate them instead."""
    with get_session() as session:
        item = session.get(InventoryItem, item_id)
        if item is None:
            raise NotFoundError("Item not found")
        session.delete(item)
        try:
            session.flush()
        except IntegrityError as e:
            raise ReferencedDataError(
                f"Cannot delete inventory item {item_id}: it is referenced by daily stock records."
            ) from e
        logger.info("inventory.delete", item_id=item_id)
