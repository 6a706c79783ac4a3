"""Shared test fixtures for chartsignal."""

from collections.abc import Callable
from decimal import Decimal

import pytest

from chartsignal.config import AppSettings, IndicatorSettings, SignalSettings, StorageSettings
from chartsignal.data.loader import generate_sample_csv
from chartsignal.data.models import OHLCRecord


def _records_from_closes(closes: list) -> list[OHLCRecord]:
    records = []
    for i, close in enumerate(closes):
        price = Decimal(str(close))
        records.append(
            OHLCRecord(
                time=f"t{i}",
                open=price,
                high=price + 1,
                low=price - 1,
                close=price,
                volume=Decimal("1000"),
            )
        )
    return records


@pytest.fixture
def make_records() -> Callable[[list], list[OHLCRecord]]:
    """Factory building OHLC records whose close prices are the given values."""
    return _records_from_closes


@pytest.fixture
def sample_csv() -> str:
    """The 20-row example file offered for download."""
    return generate_sample_csv()


@pytest.fixture
def mock_settings(tmp_path) -> AppSettings:
    """Return AppSettings with default periods and a temporary database."""
    return AppSettings(
        log_level="DEBUG",
        indicators=IndicatorSettings(),
        signal=SignalSettings(),
        storage=StorageSettings(db_path=str(tmp_path / "analyses.db")),
    )
