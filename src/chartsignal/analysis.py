"""End-to-end analysis: OHLC records -> indicators -> trading signal.

Every call recomputes everything from the full history; nothing is updated
incrementally.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from chartsignal.config import IndicatorSettings, SignalSettings
from chartsignal.data.loader import parse_csv
from chartsignal.data.models import OHLCRecord
from chartsignal.indicators.aggregator import IndicatorResult, compute_indicators
from chartsignal.logging import get_logger
from chartsignal.signals.models import TradingSignal
from chartsignal.signals.synthesizer import generate_signal

logger = get_logger(__name__)


@dataclass
class Analysis:
    """Records, the indicators computed over them, and the resulting signal."""

    records: list[OHLCRecord]
    indicators: IndicatorResult
    signal: TradingSignal

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "records": [r.to_dict() for r in self.records],
            "indicators": self.indicators.to_dict(),
            "signal": self.signal.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Analysis":
        """Restore an analysis produced by :meth:`to_dict`."""
        return cls(
            records=[OHLCRecord.from_dict(r) for r in data["records"]],
            indicators=IndicatorResult.from_dict(data["indicators"]),
            signal=TradingSignal.from_dict(data["signal"]),
        )


def analyze(
    records: Sequence[OHLCRecord],
    indicator_settings: IndicatorSettings | None = None,
    signal_settings: SignalSettings | None = None,
) -> Analysis:
    """Compute indicators and the trading signal for ``records``.

    Args:
        records: Non-empty, chronologically ordered OHLC records.
        indicator_settings: Indicator periods (defaults apply when None).
        signal_settings: Rule thresholds and weights (defaults apply when None).

    Returns:
        Analysis bundling the inputs, indicator series and signal.
    """
    indicators = compute_indicators(records, indicator_settings)
    signal = generate_signal(records, indicators, signal_settings)

    logger.info(
        "analysis_completed",
        records=len(records),
        verdict=signal.verdict.value,
        confidence=signal.confidence,
        price=str(signal.price),
        time=signal.time,
    )
    return Analysis(records=list(records), indicators=indicators, signal=signal)


def analyze_csv(
    text: str,
    indicator_settings: IndicatorSettings | None = None,
    signal_settings: SignalSettings | None = None,
) -> Analysis:
    """Parse CSV text and analyze it.

    Raises:
        IngestionError: Propagated from :func:`parse_csv`.
    """
    return analyze(parse_csv(text), indicator_settings, signal_settings)
