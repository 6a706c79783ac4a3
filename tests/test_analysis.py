"""Tests for the end-to-end analysis pipeline."""

import json

import pytest

from chartsignal.analysis import Analysis, analyze, analyze_csv
from chartsignal.config import IndicatorSettings, SignalSettings
from chartsignal.exceptions import MissingColumnsError
from chartsignal.signals.models import Verdict


class TestAnalyze:
    """Tests for analyze / analyze_csv."""

    def test_bundles_records_indicators_and_signal(self, make_records) -> None:
        records = make_records(list(range(100, 140)))
        analysis = analyze(records)

        assert analysis.records == records
        assert len(analysis.indicators.sma) == 40
        assert analysis.signal.time == "t39"

    def test_settings_are_passed_through(self, make_records) -> None:
        records = make_records([10, 11, 12, 13])
        analysis = analyze(
            records,
            indicator_settings=IndicatorSettings(sma_period=2, ema_period=2, rsi_period=2,
                                                 macd_fast=2, macd_slow=3, macd_signal=2),
            signal_settings=SignalSettings(rsi_overbought=101),
        )

        assert analysis.indicators.sma[1] is not None
        assert not any("overbought" in r for r in analysis.signal.reasons)

    def test_analyze_csv_sample(self, sample_csv: str) -> None:
        analysis = analyze_csv(sample_csv)

        assert len(analysis.records) == 20
        assert analysis.signal.verdict in set(Verdict)
        assert analysis.signal.time == "2024-01-26"

    def test_analyze_csv_propagates_ingestion_errors(self) -> None:
        with pytest.raises(MissingColumnsError):
            analyze_csv("time,close\n2024-01-01,1\n")


class TestAnalysisSerialization:
    """Tests for JSON serialization used by the store and the API."""

    def test_dict_is_json_serializable_and_restorable(self, sample_csv: str) -> None:
        analysis = analyze_csv(sample_csv)
        payload = json.loads(json.dumps(analysis.to_dict()))

        assert payload["signal"]["verdict"] == analysis.signal.verdict.value
        assert payload["indicators"]["sma"][0] is None
        assert Analysis.from_dict(payload) == analysis
