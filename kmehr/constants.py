"""Shared constants for KMEHR coded items."""

from enum import StrEnum


class Attribute(StrEnum):
    """XML attributes of a KMEHR `cd` element."""

    SCHEME = "S"
    SCHEME_VERSION = "SV"
    SCHEME_LABEL = "SL"


class Column(StrEnum):
    """Column names of tabular coded items."""

    SCHEME = "s"
    SCHEME_VERSION = "sv"
    SCHEME_LABEL = "sl"
    VALUE = "value"
    VALIDATION_ERRORS = "validation_errors"


VERSION_PATTERN = r"^[0-9]+\.[0-9]+$"
