"""Helpers shared by the CRUD repositories."""

from typing import Any, Iterable

from backoffice.errors import ValidationError
from backoffice.utils.numbers import to_decimal


def clean_fields(fields: dict[str, Any], allowed: set[str], decimals: Iterable[str] = ()) -> dict[str, Any]:
    """Keep known columns; money/quantity values become 2-place Decimals."""
    values = {k: v for k, v in fields.items() if k in allowed}
    for key in decimals:
        if values.get(key) is not None:
            try:
                values[key] = to_decimal(values[key])
            except ValueError as e:
                raise ValidationError(str(e), field=key) from e
    return values


def require_values(values: dict[str, Any], keys: Iterable[str]) -> None:
    """ValidationError for the first of `keys` that is missing, None or blank."""
    for key in keys:
        value = values.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{key} is required.", field=key)


def reject_nulls(values: dict[str, Any], keys: Iterable[str]) -> None:
    """Partial updates may omit `keys` but not set them to null."""
    require_values(values, [k for k in keys if k in values])
