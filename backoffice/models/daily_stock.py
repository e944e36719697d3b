"""Request bodies for the daily stock API."""

from datetime import date
from typing import Optional

from pydantic import BaseModel

from backoffice.models.fields import Amount

# Input quantities of a line item; closing_stock_calculated and variance are derived from these.
QUANTITY_FIELDS = (
    "opening_stock",
    "items_received",
    "items_taken_wasted",
    "items_sold_manual",
    "closing_stock_actual",
)


class RecordCreate(BaseModel):
    """Open a new day."""

    record_date: date
    notes: Optional[str] = None


class RecordUpdate(BaseModel):
    """Partial update; only fields present in the body are applied."""

    notes: Optional[str] = None
    is_finalized: Optional[bool] = None


class StockItemPayload(BaseModel):
    """One line of a batch update: id present = update, absent = insert."""

    id: Optional[int] = None
    daily_record_id: int
    inventory_item_id: int
    opening_stock: Amount
    items_received: Amount
    items_taken_wasted: Amount
    items_sold_manual: Amount
    closing_stock_actual: Amount

    # Derived fields and UI-only keys (inventory_item_name...) are dropped
    model_config = {"extra": "ignore"}
