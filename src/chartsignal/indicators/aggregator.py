"""Indicator aggregation over the close prices of an OHLC sequence."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from chartsignal.config import IndicatorSettings
from chartsignal.data.models import OHLCRecord
from chartsignal.indicators.macd import MACDResult, compute_macd
from chartsignal.indicators.moving_average import compute_ema, compute_sma
from chartsignal.indicators.rsi import compute_rsi


@dataclass
class IndicatorResult:
    """All indicator series for one OHLC sequence, aligned with its records."""

    sma: list[Decimal | None]
    ema: list[Decimal | None]
    rsi: list[Decimal | None]
    macd: MACDResult

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output (Decimals as strings, None kept)."""
        return {
            "sma": [None if v is None else str(v) for v in self.sma],
            "ema": [None if v is None else str(v) for v in self.ema],
            "rsi": [None if v is None else str(v) for v in self.rsi],
            "macd": self.macd.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "IndicatorResult":
        """Restore a result produced by :meth:`to_dict`."""
        return cls(
            sma=[None if v is None else Decimal(v) for v in data["sma"]],
            ema=[None if v is None else Decimal(v) for v in data["ema"]],
            rsi=[None if v is None else Decimal(v) for v in data["rsi"]],
            macd=MACDResult.from_dict(data["macd"]),
        )


def compute_indicators(
    records: Sequence[OHLCRecord],
    settings: IndicatorSettings | None = None,
) -> IndicatorResult:
    """Compute SMA, EMA, RSI and MACD over the close prices of ``records``.

    Args:
        records: Chronologically ordered OHLC records.
        settings: Indicator periods. Defaults to SMA/EMA 20, RSI 14,
            MACD 12/26/9.

    Returns:
        IndicatorResult with every series the same length as ``records``.
    """
    if settings is None:
        settings = IndicatorSettings()

    closes = [r.close for r in records]

    return IndicatorResult(
        sma=compute_sma(closes, settings.sma_period),
        ema=compute_ema(closes, settings.ema_period),
        rsi=compute_rsi(closes, settings.rsi_period),
        macd=compute_macd(
            closes,
            fast=settings.macd_fast,
            slow=settings.macd_slow,
            signal=settings.macd_signal,
        ),
    )
