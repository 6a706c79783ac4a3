"""Typed read/write access to saved analyses.

Analyses are stored whole as JSON TEXT (Decimals as strings) so that a
reload restores exactly what was computed.
"""

from __future__ import annotations

import json
import time
from typing import TYPE_CHECKING

from chartsignal.data.database import AnalysisDatabase
from chartsignal.logging import get_logger

if TYPE_CHECKING:
    from chartsignal.analysis import Analysis

logger = get_logger(__name__)


class AnalysisStore:
    """Async SQLite store for the analyses shown on the dashboard.

    Usage:
        async with AnalysisDatabase("data/analyses.db") as database:
            store = AnalysisStore(database)
            latest = await store.get_latest_analysis()
    """

    def __init__(self, database: AnalysisDatabase) -> None:
        self._database = database

    async def save_analysis(self, analysis: Analysis) -> int:
        """Persist an analysis and return its row id."""
        payload = json.dumps(analysis.to_dict())
        cursor = await self._database.db.execute(
            "INSERT INTO analyses "
            "(created_at_ms, last_time, verdict, confidence, payload) "
            "VALUES (?, ?, ?, ?, ?)",
            (
                int(time.time() * 1000),
                analysis.signal.time,
                analysis.signal.verdict.value,
                analysis.signal.confidence,
                payload,
            ),
        )
        await self._database.db.commit()

        row_id = cursor.lastrowid or 0
        logger.debug("analysis_saved", id=row_id, verdict=analysis.signal.verdict.value)
        return row_id

    async def get_latest_analysis(self) -> Analysis | None:
        """Return the most recently saved analysis, or None if there is none."""
        from chartsignal.analysis import Analysis

        cursor = await self._database.db.execute(
            "SELECT payload FROM analyses ORDER BY id DESC LIMIT 1"
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return Analysis.from_dict(json.loads(row[0]))

    async def clear(self) -> int:
        """Delete all saved analyses. Returns the number of rows removed."""
        cursor = await self._database.db.execute("DELETE FROM analyses")
        await self._database.db.commit()
        deleted = cursor.rowcount
        logger.info("analyses_cleared", deleted=deleted)
        return deleted
