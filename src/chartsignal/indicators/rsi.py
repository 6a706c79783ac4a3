"""Relative Strength Index over a trailing window of price changes.

CRITICAL: All computations use Decimal. Never use float.
"""

from collections.abc import Sequence
from decimal import Decimal

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def compute_rsi(values: Sequence[Decimal], period: int = 14) -> list[Decimal | None]:
    """Compute RSI using simple (non-smoothed) average gains and losses.

    Changes are ``diff[k] = values[k] - values[k-1]``. The value at index
    i >= period looks at the ``period`` changes ending with the move into
    ``values[i]`` (diff indices i-period .. i-1):

        avg_gain = sum(positive changes) / period
        avg_loss = sum(|negative changes|) / period
        RSI = 100 - 100 / (1 + avg_gain / avg_loss)

    When the window holds no losses (including a flat window) the result is
    exactly 100 rather than a division by zero.

    Args:
        values: Ordered close prices (oldest first).
        period: Number of changes in the window, >= 1.

    Returns:
        List of RSI values in [0, 100], same length as input. Index i < period
        is ``None``.
    """
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")

    diffs = [values[k] - values[k - 1] for k in range(1, len(values))]
    divisor = Decimal(period)

    result: list[Decimal | None] = []
    gain_sum = _ZERO
    loss_sum = _ZERO

    for i in range(len(values)):
        if i >= 1:
            # diff[i-1] enters the window ending at values[i]
            entering = diffs[i - 1]
            if entering > 0:
                gain_sum += entering
            elif entering < 0:
                loss_sum -= entering
        if i > period:
            leaving = diffs[i - period - 1]
            if leaving > 0:
                gain_sum -= leaving
            elif leaving < 0:
                loss_sum += leaving

        if i < period:
            result.append(None)
            continue

        avg_loss = loss_sum / divisor
        if avg_loss == 0:
            result.append(_HUNDRED)
            continue

        rs = (gain_sum / divisor) / avg_loss
        result.append(_HUNDRED - _HUNDRED / (1 + rs))

    return result
