"""
Market Reporter

Runs one scrape for a market and turns it into a chat message:
1. Extract the snapshot
2. Compute the volume trend and overwrite the baseline
3. Append the snapshot to history
4. Format the report
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .config import MarketConfig, get_market_config
from .formatting import format_report
from .monitoring import get_logger, snapshot_logger
from .polymarket import MarketSnapshot, SnapshotExtractor
from .storage import BaselineStore, SnapshotHistory
from .trends import TrendResult, compute_trend

logger = get_logger("reporter")


@dataclass
class MarketReport:
    """Everything produced by one report run."""
    market: MarketConfig
    snapshot: MarketSnapshot
    trend: TrendResult
    text: str


class MarketReporter:
    """
    Produces market reports for commands and scheduled pushes.

    Baseline reads and writes for a report happen under one lock, so a
    command and a scheduled push can never interleave on the same baseline.
    """

    def __init__(
        self,
        extractor: SnapshotExtractor,
        baselines: BaselineStore,
        history: Optional[SnapshotHistory] = None,
    ):
        self.extractor = extractor
        self.baselines = baselines
        self.history = history
        self._lock = asyncio.Lock()

    async def report(self, market_key: str, now: Optional[datetime] = None) -> MarketReport:
        """
        Scrape a market and build its report.

        Args:
            market_key: Market key (e.g., "london")
            now: Time shown in the report header

        Returns:
            MarketReport with the formatted text

        Raises:
            UsageError: If the market key is unknown
            ScrapeError: If the page cannot be loaded; the baseline is untouched
        """
        market = get_market_config(market_key)

        async with self._lock:
            snapshot = await self.extractor.extract(market.key)
            trend = compute_trend(market.key, snapshot.total_volume, self.baselines)
            if self.history is not None:
                self.history.append(market.key, snapshot, trend.percent_change)

        snapshot_logger.log_snapshot(market.key, snapshot, trend)
        logger.info(f"{market.name}: total ${snapshot.total_volume:,} ({trend.narrative})")

        return MarketReport(
            market=market,
            snapshot=snapshot,
            trend=trend,
            text=format_report(market, snapshot, trend, now),
        )
