"""Technical indicator computations.

Every function returns series aligned 1:1 with its input, using ``None``
for positions still inside the indicator's warm-up window.
"""

from chartsignal.indicators.aggregator import IndicatorResult, compute_indicators
from chartsignal.indicators.macd import MACDResult, compute_macd
from chartsignal.indicators.moving_average import compute_ema, compute_sma
from chartsignal.indicators.rsi import compute_rsi

__all__ = [
    "IndicatorResult",
    "MACDResult",
    "compute_ema",
    "compute_indicators",
    "compute_macd",
    "compute_rsi",
    "compute_sma",
]
