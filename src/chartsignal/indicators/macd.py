"""Moving Average Convergence/Divergence (MACD).

CRITICAL: All computations use Decimal. Never use float.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from chartsignal.indicators.moving_average import compute_ema


@dataclass
class MACDResult:
    """MACD line, signal line and histogram, each aligned with the input."""

    macd: list[Decimal | None]
    signal: list[Decimal | None]
    histogram: list[Decimal | None]

    def to_dict(self) -> dict:
        return {
            "macd": _series_to_json(self.macd),
            "signal": _series_to_json(self.signal),
            "histogram": _series_to_json(self.histogram),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MACDResult":
        return cls(
            macd=_series_from_json(data["macd"]),
            signal=_series_from_json(data["signal"]),
            histogram=_series_from_json(data["histogram"]),
        )


def _series_to_json(series: list[Decimal | None]) -> list[str | None]:
    return [None if v is None else str(v) for v in series]


def _series_from_json(series: list[str | None]) -> list[Decimal | None]:
    return [None if v is None else Decimal(v) for v in series]


def _subtract(
    left: list[Decimal | None], right: list[Decimal | None]
) -> list[Decimal | None]:
    """Element-wise ``left - right``, ``None`` wherever either side is ``None``."""
    return [
        a - b if a is not None and b is not None else None
        for a, b in zip(left, right, strict=True)
    ]


def compute_macd(
    values: Sequence[Decimal],
    fast: int = 12,
    slow: int = 26,
    signal: int = 9,
) -> MACDResult:
    """Compute the MACD line, its signal line and the histogram.

    macd[i] = EMA(fast)[i] - EMA(slow)[i], defined from index slow-1 on.
    The signal line is EMA(signal) over the run of defined macd values,
    seeded with the mean of the first ``signal`` of them, and written back at
    the same indices. It is therefore defined from
    ``first_macd_index + signal - 1`` on and always has the input's length;
    with too few macd values it is all ``None``.

    Args:
        values: Ordered close prices (oldest first).
        fast: Fast EMA period.
        slow: Slow EMA period (greater than ``fast``).
        signal: Signal line EMA period.

    Returns:
        MACDResult with three series aligned to ``values``.
    """
    macd_line = _subtract(compute_ema(values, fast), compute_ema(values, slow))

    first_defined = next(
        (i for i, v in enumerate(macd_line) if v is not None), len(macd_line)
    )
    # Both EMAs stay defined once warmed up, so the tail is contiguous.
    defined_run: list[Decimal] = [v for v in macd_line[first_defined:] if v is not None]
    signal_line: list[Decimal | None] = [None] * first_defined
    signal_line.extend(compute_ema(defined_run, signal))

    return MACDResult(
        macd=macd_line,
        signal=signal_line,
        histogram=_subtract(macd_line, signal_line),
    )
