"""ORM models for daily stock reconciliation: one record per date, one line per inventory item."""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, Date, ForeignKey, Numeric, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backoffice.db.base import Base, TimestampMixin
from backoffice.utils.numbers import ZERO

if TYPE_CHECKING:
    from backoffice.db.models.inventory import InventoryItem


class DailyStockRecord(Base, TimestampMixin):
    """Stock count for one calendar day. Finalized records are locked for non-admins."""

    __tablename__ = "daily_stock_records"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    record_date: Mapped[date] = mapped_column(Date, unique=True, nullable=False, index=True)
    recorded_by_user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_finalized: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    items: Mapped[list["DailyStockItemDetail"]] = relationship(
        "DailyStockItemDetail",
        back_populates="record",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class DailyStockItemDetail(Base):
    """Per-item line of a daily record. closing_stock_calculated and variance are derived, never input."""

    __tablename__ = "daily_stock_item_details"
    __table_args__ = (
        UniqueConstraint("daily_record_id", "inventory_item_id", name="uq_daily_stock_item_per_record"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    daily_record_id: Mapped[int] = mapped_column(
        ForeignKey("daily_stock_records.id", ondelete="CASCADE"), nullable=False, index=True
    )
    inventory_item_id: Mapped[int] = mapped_column(ForeignKey("inventory.id"), nullable=False, index=True)

    opening_stock: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    items_received: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    items_taken_wasted: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    items_sold_manual: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    closing_stock_actual: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    closing_stock_calculated: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)
    variance: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=ZERO)

    record: Mapped["DailyStockRecord"] = relationship("DailyStockRecord", back_populates="items")
    inventory_item: Mapped["InventoryItem"] = relationship("InventoryItem", lazy="joined")
