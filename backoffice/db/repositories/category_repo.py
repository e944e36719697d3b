"""Category repository."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from backoffice.db import get_session
from backoffice.db.models.inventory import Category
from backoffice.errors import ConflictError, ValidationError


def category_to_dict(category: Category) -> dict[str, Any]:
    return {"id": category.id, "name": category.name}


def list_categories() -> list[dict[str, Any]]:
    with get_session() as session:
        rows = session.scalars(select(Category).order_by(Category.name.asc())).all()
        return [category_to_dict(c) for c in rows]


def create_category(name: str) -> dict[str, Any]:
    name = (name or "").strip()
    if not name:
        raise ValidationError("name is required.", field="name")
    with get_session() as session:
        category = Category(name=name)
        session.add(category)
        try:
            session.flush()
        except IntegrityError as e:
            raise ConflictError(f"Category {name!r} already exists.") from e
        return category_to_dict(category)
