"""Simple and exponential moving averages over Decimal series.

Both functions return a list aligned 1:1 with the input. Positions that are
still inside the warm-up window hold ``None``.

CRITICAL: All computations use Decimal. Never use float.
"""

from collections.abc import Sequence
from decimal import Decimal


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")


def compute_sma(values: Sequence[Decimal], period: int) -> list[Decimal | None]:
    """Compute the Simple Moving Average over a trailing window.

    Index i < period-1 is ``None``; from period-1 onward each entry is the
    mean of ``values[i-period+1 .. i]``. A running window sum keeps the cost
    linear in the input length.

    Args:
        values: Ordered values (oldest first).
        period: Window length, >= 1.

    Returns:
        List of SMA values, same length as input. All ``None`` when
        ``period`` exceeds the input length.
    """
    _check_period(period)

    result: list[Decimal | None] = []
    window_sum = Decimal("0")
    divisor = Decimal(period)

    for i, value in enumerate(values):
        window_sum += value
        if i >= period:
            window_sum -= values[i - period]
        if i < period - 1:
            result.append(None)
        else:
            result.append(window_sum / divisor)

    return result


def compute_ema(values: Sequence[Decimal], period: int) -> list[Decimal | None]:
    """Compute the Exponential Moving Average seeded with a simple mean.

    Uses the recursive formula:
        multiplier = 2 / (period + 1)
        EMA_i = (value_i - EMA_{i-1}) * multiplier + EMA_{i-1}

    The seed at index period-1 is the arithmetic mean of the first ``period``
    elements of ``values`` itself, so calling this on a sub-sequence (as the
    MACD signal line does) seeds from that sub-sequence. Results keep the
    Decimal context precision (significant digits, not a fixed exponent), so
    very large and very small prices are both handled.

    Args:
        values: Ordered values (oldest first).
        period: Smoothing period, >= 1.

    Returns:
        List of EMA values, same length as input. All ``None`` when
        ``period`` exceeds the input length.
    """
    _check_period(period)

    if len(values) < period:
        return [None] * len(values)

    multiplier = Decimal("2") / (Decimal(period) + Decimal("1"))

    result: list[Decimal | None] = [None] * (period - 1)
    ema = sum(values[:period], Decimal("0")) / Decimal(period)
    result.append(ema)

    for value in values[period:]:
        ema = (value - ema) * multiplier + ema
        result.append(ema)

    return result
