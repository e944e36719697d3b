"""Utility modules."""

from backoffice.utils.logger import bind_context, clear_context, get_logger
from backoffice.utils.numbers import format_quantity, to_decimal

__all__ = [
    "get_logger",
    "bind_context",
    "clear_context",
    "format_quantity",
    "to_decimal",
]
