"""Data models for OHLC price records.

CRITICAL: All prices and volumes use Decimal. Never use float for price data.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class OHLCRecord:
    """A single OHLC candle for one time step.

    ``time`` is an opaque label taken verbatim from the source file; it is
    never parsed as a date. Position in the sequence is the only notion of
    time the indicators rely on.
    """

    time: str
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal

    def to_dict(self) -> dict:
        """Serialize to dict with Decimals as strings."""
        return {
            "time": self.time,
            "open": str(self.open),
            "high": str(self.high),
            "low": str(self.low),
            "close": str(self.close),
            "volume": str(self.volume),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OHLCRecord":
        """Restore a record produced by :meth:`to_dict`."""
        return cls(
            time=str(data["time"]),
            open=Decimal(data["open"]),
            high=Decimal(data["high"]),
            low=Decimal(data["low"]),
            close=Decimal(data["close"]),
            volume=Decimal(data["volume"]),
        )
