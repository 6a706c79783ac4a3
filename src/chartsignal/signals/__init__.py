"""Signal synthesis: turns indicator values into a CALL/PUT/NEUTRAL verdict."""

from chartsignal.signals.models import TradingSignal, Verdict
from chartsignal.signals.synthesizer import generate_signal

__all__ = [
    "TradingSignal",
    "Verdict",
    "generate_signal",
]
