"""Validation rules for tabular KMEHR coded items using Polars.

Expects columns `s`, `sv`, `sl` and `value` (see CODED_ITEM_SCHEMA). A known
scheme whose `sv` differs from the catalog version is reported by the
`version_matches_catalog` rule; rejecting or accepting such rows is left to
the caller.
"""

from dataclasses import dataclass
from typing import Any, Callable

import polars as pl

from kmehr.cd.item_schemes import CDItemScheme, all_schemes
from kmehr.constants import VERSION_PATTERN, Column


@dataclass
class ValidationRule:
    """A validation rule with name and check expression."""

    name: str
    check: Callable[[pl.LazyFrame], pl.Expr]
    description: str


CATALOG_VERSIONS: dict[str, str] = {s.wire_name: s.version for s in all_schemes()}

CODED_ITEM_COLUMNS = [
    Column.SCHEME.value,
    Column.SCHEME_VERSION.value,
    Column.SCHEME_LABEL.value,
    Column.VALUE.value,
]

S = pl.col(Column.SCHEME.value)
SV = pl.col(Column.SCHEME_VERSION.value)
SL = pl.col(Column.SCHEME_LABEL.value)
VALUE = pl.col(Column.VALUE.value)


def _is_known_scheme(col: pl.Expr) -> pl.Expr:
    """Check if value is a catalog wire name (exact match, no case folding or trimming)."""
    return col.is_in(list(CATALOG_VERSIONS))


def _catalog_version(col: pl.Expr) -> pl.Expr:
    """Map a wire name to its catalog version, null when unknown."""
    return col.replace_strict(CATALOG_VERSIONS, default=None, return_dtype=pl.String)


def _is_not_blank(col: pl.Expr) -> pl.Expr:
    """Check if value is present and not only whitespace."""
    return col.is_not_null() & (col.str.strip_chars() != "")


CODED_ITEM_VALIDATION_RULES: list[ValidationRule] = [
    ValidationRule(
        name="scheme_required",
        check=lambda _: _is_not_blank(S),
        description="Coded item must have an S attribute",
    ),
    ValidationRule(
        name="scheme_known",
        check=lambda _: S.is_null() | _is_known_scheme(S),
        description="S must be one of the CD-ITEM scheme wire names",
    ),
    ValidationRule(
        name="version_required",
        check=lambda _: _is_not_blank(SV),
        description="Coded item must have an SV attribute",
    ),
    ValidationRule(
        name="version_format",
        check=lambda _: SV.is_null() | SV.str.contains(VERSION_PATTERN),
        description="SV must be in major.minor format",
    ),
    ValidationRule(
        name="version_matches_catalog",
        check=lambda _: SV.is_null()
        | ~_is_known_scheme(S).fill_null(False)
        | (SV == _catalog_version(S)),
        description="SV must equal the catalog version of a known scheme",
    ),
    ValidationRule(
        name="value_required",
        check=lambda _: _is_not_blank(VALUE),
        description="Coded item must have a code value",
    ),
    ValidationRule(
        name="local_label_required",
        check=lambda _: (S != CDItemScheme.LOCAL.wire_name).fill_null(True)
        | _is_not_blank(SL),
        description="LOCAL scheme items must carry an SL label",
    ),
]


def _as_lazyframe(items: pl.LazyFrame | pl.DataFrame) -> pl.LazyFrame:
    if isinstance(items, pl.DataFrame):
        return items.lazy()
    return items


def get_scheme_catalog() -> pl.DataFrame:
    """Catalog as a DataFrame with columns wire_name, version."""
    return pl.DataFrame(
        {
            "wire_name": [s.wire_name for s in all_schemes()],
            "version": [s.version for s in all_schemes()],
        },
        schema={"wire_name": pl.String, "version": pl.String},
    )


def validate_coded_items(items: pl.LazyFrame | pl.DataFrame) -> pl.LazyFrame:
    """
    Validate coded items and populate validation_errors column.

    Args:
        items: Polars LazyFrame or DataFrame with s, sv, sl, value columns

    Returns:
        Polars LazyFrame with validation_errors populated
    """
    lf = _as_lazyframe(items)
    present = set(lf.collect_schema().names())
    # all-null columns come in as pl.Null, and sl is optional
    lf = lf.with_columns(
        [
            (pl.col(name) if name in present else pl.lit(None)).cast(pl.String).alias(name)
            for name in CODED_ITEM_COLUMNS
        ]
    )

    error_exprs = [
        pl.when(~rule.check(lf).fill_null(False))
        .then(pl.lit(rule.name))
        .otherwise(pl.lit(None, dtype=pl.String))
        for rule in CODED_ITEM_VALIDATION_RULES
    ]

    return lf.with_columns(
        pl.concat_list(error_exprs)
        .list.drop_nulls()
        .alias(Column.VALIDATION_ERRORS.value)
    )


def get_valid_coded_items(validated_lf: pl.LazyFrame) -> pl.LazyFrame:
    """Filter to only valid coded items (no validation errors)."""
    return validated_lf.filter(pl.col(Column.VALIDATION_ERRORS.value).list.len() == 0)


def get_invalid_coded_items(validated_lf: pl.LazyFrame) -> pl.LazyFrame:
    """Filter to only invalid coded items (has validation errors)."""
    return validated_lf.filter(pl.col(Column.VALIDATION_ERRORS.value).list.len() > 0)


def get_validation_summary(validated_lf: pl.LazyFrame | pl.DataFrame) -> pl.DataFrame:
    """Error counts per rule, most frequent first."""
    return (
        _as_lazyframe(validated_lf)
        .select(pl.col(Column.VALIDATION_ERRORS.value).explode().alias("error"))
        .filter(pl.col("error").is_not_null())
        .group_by("error")
        .agg(pl.len().alias("count"))
        .sort(["count", "error"], descending=[True, False])
        .collect()
    )


def _errors_by_scheme(validated_lf: pl.LazyFrame) -> pl.DataFrame:
    return (
        validated_lf.filter(pl.col(Column.VALIDATION_ERRORS.value).list.len() > 0)
        .group_by(S.alias("scheme"))
        .agg(pl.len().alias("count"))
        .sort(["count", "scheme"], descending=[True, False], nulls_last=True)
        .collect()
    )


def get_validation_report(validated_lf: pl.LazyFrame | pl.DataFrame) -> dict[str, Any]:
    """
    Generate a validation report.

    Returns:
        Dictionary with record counts, validity rate, and error counts per
        rule and per scheme (invalid records only)
    """
    lf = _as_lazyframe(validated_lf)
    total = lf.select(pl.len()).collect().item()
    valid = get_valid_coded_items(lf).select(pl.len()).collect().item()

    return {
        "total_records": total,
        "valid_records": valid,
        "invalid_records": total - valid,
        "validity_rate": valid / total if total > 0 else 0.0,
        "errors_by_rule": get_validation_summary(lf).to_dicts(),
        "errors_by_scheme": _errors_by_scheme(lf).to_dicts(),
    }
