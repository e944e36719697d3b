"""Fixed-point helpers for stock quantities and prices (two fractional digits, never float)."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0.00")
# Largest value a Numeric(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")


def to_decimal(value: Any, default: Decimal = ZERO) -> Decimal:
    """Coerce DB/JSON values to a 2-place Decimal. Floats go through str() to avoid binary noise."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, float):
        value = str(value)
    try:
        quantized = Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Not a decimal quantity: {value!r}") from e
    if abs(quantized) > MAX_AMOUNT:
        raise ValueError(f"Quantity out of range (max {MAX_AMOUNT}): {value!r}")
    # normalise -0.00
    return quantized if quantized else ZERO


def format_quantity(value: Any) -> Optional[str]:
    """Render as fixed-point string with two decimals ("12.50"); None stays None."""
    if value is None:
        return None
    return f"{to_decimal(value):.2f}"
