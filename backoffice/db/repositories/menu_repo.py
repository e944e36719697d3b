"""Menu items repository: items with their category name, filterable for the menu screen."""

from typing import Any, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backoffice.db import get_session
from backoffice.db.models.inventory import Category
from backoffice.db.models.menu import MenuItem
from backoffice.db.repositories.common import clean_fields, reject_nulls, require_values
from backoffice.errors import ConflictError, NotFoundError, ValidationError
from backoffice.utils.logger import get_logger
from backoffice.utils.numbers import format_quantity

logger = get_logger("backoffice.db.menu_repo")

_FIELDS = {"name", "description", "price", "category_id", "is_available"}
DUPLICATE_NAME = "A menu item with this name already exists."


def menu_item_to_dict(item: MenuItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "description": item.description,
        "price": format_quantity(item.price),
        "category_id": item.category_id,
        "category_name": item.category.name if item.category else None,
        "is_available": item.is_available,
    }


def _check_category(session: Session, category_id: Optional[int]) -> None:
    if category_id is not None and session.get(Category, category_id) is None:
        raise ValidationError(f"Category {category_id} does not exist.", field="category_id")


def list_menu_items(
    search: Optional[str] = None,
    category_id: Optional[int] = None,
    is_available: Optional[bool] = None,
) -> list[dict[str, Any]]:
    with get_session() as session:
        q = select(MenuItem)
        if search:
            pattern = f"%{search}%"
            q = q.where(or_(MenuItem.name.ilike(pattern), MenuItem.description.ilike(pattern)))
        if category_id is not None:
            q = q.where(MenuItem.category_id == category_id)
        if is_available is not None:
            q = q.where(MenuItem.is_available.is_(is_available))
        q = q.order_by(MenuItem.name.asc())
        return [menu_item_to_dict(i) for i in session.scalars(q).unique().all()]


def create_menu_item(**fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _FIELDS, ("price",))
    require_values(values, ("name", "price"))
    with get_session() as session:
        _check_category(session, values.get("category_id"))
        item = MenuItem(**values)
        session.add(item)
        try:
            session.flush()
        except IntegrityError as e:
            raise ConflictError(DUPLICATE_NAME) from e
        logger.info("menu_items.create", item_id=item.id, name=item.name)
        return menu_item_to_dict(item)


def update_menu_item(item_id: int, **fields: Any) -> dict[str, Any]:
    values = clean_fields(fields, _FIELDS, ("price",))
    reject_nulls(values, ("name", "price", "is_available"))
    with get_session() as session:
        item = session.get(MenuItem, item_id)
        if item is None:
            raise NotFoundError("Menu item not found")
        if "category_id" in values:
            _check_category(session, values["category_id"])
        for key, value in values.items():
            setattr(item, key, value)
        try:
            session.flush()
        except IntegrityError as e:
            raise ConflictError(DUPLICATE_NAME) from e
        session.refresh(item)
        logger.info("menu_items.update", item_id=item_id, fields=sorted(values))
        return menu_item_to_dict(item)


def delete_menu_item(item_id: int) -> dict[str, Any]:
    with get_session() as session:
        item = session.get(MenuItem, item_id)
        if item is None:
            raise NotFoundError("Menu item not found")
        session.delete(item)
    logger.info("menu_items.delete", item_id=item_id)
    return {"message": "Menu item deleted successfully.", "id": item_id}
