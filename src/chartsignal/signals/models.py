"""Trading signal data models."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class Verdict(str, Enum):
    """Directional call produced by the signal synthesizer."""

    CALL = "CALL"
    PUT = "PUT"
    NEUTRAL = "NEUTRAL"


@dataclass
class TradingSignal:
    """Verdict for the last record of a sequence, with supporting reasons.

    ``reasons`` keeps the order in which the rules were evaluated.
    """

    verdict: Verdict
    confidence: int  # 0-100
    price: Decimal  # close of the last record
    time: str  # time label of the last record
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to dict for JSON output."""
        return {
            "verdict": self.verdict.value,
            "confidence": self.confidence,
            "price": str(self.price),
            "time": self.time,
            "reasons": list(self.reasons),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TradingSignal":
        """Restore a signal produced by :meth:`to_dict`."""
        return cls(
            verdict=Verdict(data["verdict"]),
            confidence=int(data["confidence"]),
            price=Decimal(data["price"]),
            time=str(data["time"]),
            reasons=list(data["reasons"]),
        )
