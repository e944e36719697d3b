"""Request bodies for inventory and categories."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from backoffice.models.fields import Amount


class CategoryIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)


class InventoryItemIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    unit: str = "pcs"
    is_active: bool = True
    category_id: Optional[int] = None
    quantity: Amount = Decimal("0")
    cost_price: Optional[Amount] = None
    selling_price: Optional[Amount] = None
    reorder_level: Optional[int] = Field(None, ge=0)


class InventoryItemUpdate(BaseModel):
    """Partial update of an inventory item."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    unit: Optional[str] = None
    is_active: Optional[bool] = None
    category_id: Optional[int] = None
    quantity: Optional[Amount] = None
    cost_price: Optional[Amount] = None
    selling_price: Optional[Amount] = None
    reorder_level: Optional[int] = Field(None, ge=0)
