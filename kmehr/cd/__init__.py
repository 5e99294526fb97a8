"""KMEHR code tables (cd/v1)."""

from .item_schemes import (
    CDItemScheme,
    UnknownScheme,
    all_schemes,
    from_wire_name,
    version,
    wire_name,
)

__all__ = [
    "CDItemScheme",
    "UnknownScheme",
    "all_schemes",
    "from_wire_name",
    "version",
    "wire_name",
]
