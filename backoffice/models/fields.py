"""Shared pydantic field types for stock quantities and money."""

from decimal import Decimal
from typing import Annotated

from pydantic import Field

from backoffice.utils.numbers import MAX_AMOUNT

# Non-negative and small enough for a Numeric(12, 2) column
Amount = Annotated[Decimal, Field(ge=0, le=MAX_AMOUNT, allow_inf_nan=False)]
