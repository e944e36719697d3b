"""Request bodies for menu items."""

from typing import Optional

from pydantic import BaseModel, Field

from backoffice.models.fields import Amount


class MenuItemIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: Amount
    category_id: Optional[int] = None
    is_available: bool = True


class MenuItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    price: Optional[Amount] = None
    category_id: Optional[int] = None
    is_available: Optional[bool] = None
