"""Tabular validation of KMEHR coded items."""

from .coded_items import (
    CODED_ITEM_VALIDATION_RULES,
    get_invalid_coded_items,
    get_scheme_catalog,
    get_valid_coded_items,
    get_validation_report,
    get_validation_summary,
    validate_coded_items,
)

__all__ = [
    "CODED_ITEM_VALIDATION_RULES",
    "get_invalid_coded_items",
    "get_scheme_catalog",
    "get_valid_coded_items",
    "get_validation_report",
    "get_validation_summary",
    "validate_coded_items",
]
