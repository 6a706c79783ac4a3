"""Technical indicators and rule-based CALL/PUT signals from OHLC price data."""

from chartsignal.analysis import Analysis, analyze, analyze_csv

__all__ = ["Analysis", "analyze", "analyze_csv"]

__version__ = "0.1.0"
