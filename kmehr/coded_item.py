"""Coded item value object.

A KMEHR coded item is a `cd` element whose `S`/`SV` attributes name a
CD-ITEM scheme and its version, optionally with an `SL` label (used by the
LOCAL scheme to name the local code system), and whose text is the code.

`to_attributes` and `from_attributes` are the only paths between a
`CDItemScheme` and the attribute strings seen by the XML layer.
"""

from collections.abc import Mapping
from dataclasses import dataclass

import polars as pl

from kmehr.cd.item_schemes import CDItemScheme
from kmehr.constants import Attribute, Column


@dataclass(frozen=True)
class CodedItem:
    """A code from one of the CD-ITEM schemes."""

    scheme: CDItemScheme
    value: str
    version: str | None = None
    label: str | None = None

    def __post_init__(self):
        # None means the catalog version; an empty SV is kept as-is
        if self.version is None:
            object.__setattr__(self, "version", self.scheme.version)

    @classmethod
    def of(cls, scheme: CDItemScheme, value: str, label: str | None = None) -> "CodedItem":
        """Build an item carrying the catalog version of `scheme`."""
        return cls(scheme=scheme, value=value, version=scheme.version, label=label)

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str], value: str) -> "CodedItem":
        """
        Build an item from the attributes of a parsed `cd` element.

        Raises:
            UnknownScheme: if `S` is missing or not a CD-ITEM wire name.
        """
        scheme = CDItemScheme.from_wire_name(attributes.get(Attribute.SCHEME.value, ""))
        return cls(
            scheme=scheme,
            value=value,
            version=attributes.get(Attribute.SCHEME_VERSION.value),
            label=attributes.get(Attribute.SCHEME_LABEL.value),
        )

    @property
    def has_catalog_version(self) -> bool:
        return self.version == self.scheme.version

    def to_attributes(self) -> dict[str, str]:
        attributes = {
            Attribute.SCHEME.value: self.scheme.wire_name,
            Attribute.SCHEME_VERSION.value: self.version,
        }
        if self.label is not None:
            attributes[Attribute.SCHEME_LABEL.value] = self.label
        return attributes

    def as_dict(self) -> dict[str, str | None]:
        return {
            Column.SCHEME.value: self.scheme.wire_name,
            Column.SCHEME_VERSION.value: self.version,
            Column.SCHEME_LABEL.value: self.label,
            Column.VALUE.value: self.value,
        }


CODED_ITEM_SCHEMA = {
    Column.SCHEME.value: pl.String,
    Column.SCHEME_VERSION.value: pl.String,
    Column.SCHEME_LABEL.value: pl.String,
    Column.VALUE.value: pl.String,
}


def coded_items_to_frame(items: list[CodedItem]) -> pl.DataFrame:
    """Flatten coded items into a DataFrame with CODED_ITEM_SCHEMA."""
    return pl.DataFrame([item.as_dict() for item in items], schema=CODED_ITEM_SCHEMA)
