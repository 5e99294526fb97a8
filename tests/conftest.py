import polars as pl
import pytest

from kmehr.coded_item import CODED_ITEM_SCHEMA


@pytest.fixture
def coded_items() -> pl.DataFrame:
    rows = [
        {"s": "CD-ITEM", "sv": "1.11", "sl": None, "value": "problem"},
        {"s": "LOCAL", "sv": "1.0", "sl": "MF-ID", "value": "svc-1"},
        {"s": "CD-PARAMETER", "sv": "1.0", "sl": None, "value": "weight"},
        {"s": "cd-item", "sv": "1.11", "sl": None, "value": "problem"},
        {"s": "LOCAL", "sv": "1.0", "sl": None, "value": "svc-2"},
        {"s": None, "sv": "1,0", "sl": None, "value": ""},
    ]
    return pl.DataFrame(rows, schema=CODED_ITEM_SCHEMA)


@pytest.fixture(autouse=True)
def clear_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
