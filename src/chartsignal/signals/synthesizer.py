"""Rule-based signal synthesis from indicator values at the last record.

Five rules vote bullish or bearish, in a fixed order:

1. RSI oversold / overbought
2. MACD crossover of the signal line (weighted ``crossover_weight``)
3. MACD histogram momentum
4. Close vs SMA
5. Close vs EMA

The side with more votes wins. Confidence is its share of all votes, rounded
half-up to an integer percentage. No votes or a tie yield NEUTRAL.

CRITICAL: All computations use Decimal. Never use float for signal scores.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from chartsignal.config import SignalSettings
from chartsignal.data.models import OHLCRecord
from chartsignal.indicators.aggregator import IndicatorResult
from chartsignal.signals.models import TradingSignal, Verdict

_NO_VOTES_REASON = "No indicator votes (insufficient indicators)"
_TIE_REASON = "Tied votes (conflicting signals), wait for confirmation"


@dataclass
class _Tally:
    bullish: int = 0
    bearish: int = 0
    reasons: list[str] = field(default_factory=list)

    def bull(self, weight: int, reason: str) -> None:
        self.bullish += weight
        self.reasons.append(reason)

    def bear(self, weight: int, reason: str) -> None:
        self.bearish += weight
        self.reasons.append(reason)


def _at(series: list[Decimal | None], index: int) -> Decimal | None:
    """Value at ``index`` or ``None`` when out of range or undefined."""
    if 0 <= index < len(series):
        return series[index]
    return None


def _vote_rsi(tally: _Tally, rsi: Decimal | None, settings: SignalSettings) -> None:
    if rsi is None:
        return
    if rsi < settings.rsi_oversold:
        tally.bull(settings.vote_weight, f"RSI at {rsi:.2f} (oversold)")
    elif rsi > settings.rsi_overbought:
        tally.bear(settings.vote_weight, f"RSI at {rsi:.2f} (overbought)")


def _vote_macd(
    tally: _Tally,
    indicators: IndicatorResult,
    last: int,
    settings: SignalSettings,
) -> None:
    macd = _at(indicators.macd.macd, last)
    signal = _at(indicators.macd.signal, last)
    hist = _at(indicators.macd.histogram, last)
    prev_hist = _at(indicators.macd.histogram, last - 1)

    if macd is None or signal is None or hist is None or prev_hist is None:
        return

    if macd > signal and prev_hist < 0 and hist > 0:
        tally.bull(
            settings.crossover_weight,
            "MACD crossed above the signal line (bullish crossover)",
        )
    elif macd < signal and prev_hist > 0 and hist < 0:
        tally.bear(
            settings.crossover_weight,
            "MACD crossed below the signal line (bearish crossover)",
        )

    if hist > prev_hist and hist > 0:
        tally.bull(settings.vote_weight, "MACD histogram rising (positive momentum)")
    elif hist < prev_hist and hist < 0:
        tally.bear(settings.vote_weight, "MACD histogram falling (negative momentum)")


def _vote_price_vs(
    tally: _Tally,
    label: str,
    price: Decimal,
    average: Decimal | None,
    settings: SignalSettings,
) -> None:
    if average is None:
        return
    if price > average:
        tally.bull(settings.vote_weight, f"Price above {label} ({average:.2f})")
    elif price < average:
        tally.bear(settings.vote_weight, f"Price below {label} ({average:.2f})")


def _confidence(votes: int, total: int) -> int:
    """Percentage share of ``votes`` in ``total``, rounded half-up, capped at 100."""
    share = (Decimal(100) * votes / total).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return min(100, int(share))


def generate_signal(
    records: Sequence[OHLCRecord],
    indicators: IndicatorResult,
    settings: SignalSettings | None = None,
) -> TradingSignal:
    """Synthesize a CALL/PUT/NEUTRAL signal for the last record.

    Only the last index is evaluated. The crossover and momentum rules also
    read the previous histogram value, so with a single record they simply
    do not fire.

    Args:
        records: Chronologically ordered OHLC records (non-empty).
        indicators: Indicator series computed over ``records``.
        settings: Rule thresholds and vote weights.

    Returns:
        TradingSignal with integer confidence in [0, 100].

    Raises:
        ValueError: If ``records`` is empty.
    """
    if not records:
        raise ValueError("cannot generate a signal from an empty sequence")
    if settings is None:
        settings = SignalSettings()

    last = len(records) - 1
    price = records[last].close
    tally = _Tally()

    _vote_rsi(tally, _at(indicators.rsi, last), settings)
    _vote_macd(tally, indicators, last, settings)
    _vote_price_vs(tally, "SMA", price, _at(indicators.sma, last), settings)
    _vote_price_vs(tally, "EMA", price, _at(indicators.ema, last), settings)

    total = tally.bullish + tally.bearish
    if total == 0:
        verdict, confidence = Verdict.NEUTRAL, 0
        tally.reasons.append(_NO_VOTES_REASON)
    elif tally.bullish > tally.bearish:
        verdict, confidence = Verdict.CALL, _confidence(tally.bullish, total)
    elif tally.bearish > tally.bullish:
        verdict, confidence = Verdict.PUT, _confidence(tally.bearish, total)
    else:
        verdict, confidence = Verdict.NEUTRAL, 50
        tally.reasons.append(_TIE_REASON)

    return TradingSignal(
        verdict=verdict,
        confidence=confidence,
        price=price,
        time=records[last].time,
        reasons=tally.reasons,
    )
