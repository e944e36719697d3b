"""ORM models for the stock catalogue: Category, InventoryItem."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base, TimestampMixin


class Category(Base, TimestampMixin):
    """Grouping for inventory items (drinks, kitchen, housekeeping...)."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)

    items: Mapped[list["InventoryItem"]] = relationship("InventoryItem", back_populates="category")


class InventoryItem(Base, TimestampMixin):
    """Stocked item. Only active items get a line in each new daily stock record."""

    __tablename__ = "inventory"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    unit: Mapped[str] = mapped_column(String(32), nullable=False, default="pcs")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    category_id: Mapped[Optional[int]] = mapped_column(ForeignKey("categories.id"), nullable=True)
    quantity: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))
    cost_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    selling_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)
    reorder_level: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    category: Mapped[Optional["Category"]] = relationship("Category", back_populates="items")
