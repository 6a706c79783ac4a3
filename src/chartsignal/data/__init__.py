"""Price data ingestion and analysis persistence.

Provides the OHLC record model, CSV loading, and the SQLite-backed store
that keeps analyses between dashboard sessions.
"""

from chartsignal.data.database import AnalysisDatabase
from chartsignal.data.loader import generate_sample_csv, load_csv, parse_csv
from chartsignal.data.models import OHLCRecord
from chartsignal.data.store import AnalysisStore

__all__ = [
    "AnalysisDatabase",
    "AnalysisStore",
    "OHLCRecord",
    "generate_sample_csv",
    "load_csv",
    "parse_csv",
]
