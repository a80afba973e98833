"""Output formatting module."""

from .formatters import (
    EMPTY_PLACEHOLDER,
    JSONFormatter,
    ListingFormatter,
    OutputFormatter,
    TableFormatter,
)

__all__ = [
    "EMPTY_PLACEHOLDER",
    "JSONFormatter",
    "ListingFormatter",
    "OutputFormatter",
    "TableFormatter",
]
