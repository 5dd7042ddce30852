"""
Market Snapshot Extraction

Reads the top outcome rows and the total volume label from a Polymarket
event page.

Page structure (data-testid attributes are the de facto wire format):
- [data-testid="market-outcome"] rows, one per temperature bucket
- Per row: outcome-name, outcome-probability, yes-price, no-price,
  price-change, outcome-volume, outcome-tag
- [data-testid="market-volume"] total volume label

Any markup change upstream silently degrades fields to their defaults.
"""

from typing import Callable, Optional

from ..config import config, get_market_config
from ..errors import ScrapeError
from ..monitoring import get_logger
from .models import MarketSnapshot, Outcome, MAX_OUTCOMES
from .page_reader import PageReader
from .parsing import parse_leading_int, parse_digits, clean_text

logger = get_logger("extractor")


ROW_SELECTOR = '[data-testid="market-outcome"]'
TOTAL_VOLUME_SELECTOR = '[data-testid="market-volume"]'

FIELD_SELECTORS = {
    "name": '[data-testid="outcome-name"]',
    "probability": '[data-testid="outcome-probability"]',
    "yes_price": '[data-testid="yes-price"]',
    "no_price": '[data-testid="no-price"]',
    "change": '[data-testid="price-change"]',
    "volume": '[data-testid="outcome-volume"]',
    "tag": '[data-testid="outcome-tag"]',
}


def _default_reader_factory() -> PageReader:
    from .browser import PlaywrightPageReader
    return PlaywrightPageReader()


def parse_outcome(row: dict[str, Optional[str]]) -> Outcome:
    """Build an Outcome from raw row text, field by field."""
    return Outcome(
        name=clean_text(row.get("name")),
        probability=parse_leading_int(row.get("probability")),
        yes_price=parse_leading_int(row.get("yes_price")),
        no_price=parse_leading_int(row.get("no_price")),
        change=clean_text(row.get("change")),
        volume=parse_digits(row.get("volume")),
        tag=clean_text(row.get("tag"), default="None"),
    )


def build_snapshot(
    rows: list[dict[str, Optional[str]]],
    total_volume_text: Optional[str],
) -> MarketSnapshot:
    """Turn raw page text into a MarketSnapshot."""
    return MarketSnapshot(
        total_volume=parse_digits(total_volume_text),
        outcomes=[parse_outcome(row) for row in rows[:MAX_OUTCOMES]],
    )


class SnapshotExtractor:
    """
    Extracts MarketSnapshots from market pages.

    Opens and fully closes one reader session per call.
    """

    def __init__(
        self,
        reader_factory: Optional[Callable[[], PageReader]] = None,
        nav_timeout: Optional[float] = None,
        settle_timeout: Optional[float] = None,
    ):
        """
        Initialize extractor.

        Args:
            reader_factory: Builds a fresh PageReader per extraction
            nav_timeout: Navigation timeout in seconds
            settle_timeout: Max seconds to wait for outcome rows to render
        """
        self.reader_factory = reader_factory or _default_reader_factory
        self.nav_timeout = (
            config.scraper.nav_timeout_seconds if nav_timeout is None else nav_timeout
        )
        self.settle_timeout = (
            config.scraper.settle_timeout_seconds if settle_timeout is None else settle_timeout
        )

    async def extract(self, market_key: str) -> MarketSnapshot:
        """
        Extract a snapshot for a market.

        Args:
            market_key: Market key (e.g., "london", "nyc")

        Returns:
            MarketSnapshot with at most MAX_OUTCOMES outcomes

        Raises:
            UsageError: If the market key is unknown
            ScrapeError: If the page cannot be loaded or the reader fails
        """
        market = get_market_config(market_key)

        try:
            async with self.reader_factory() as reader:
                await reader.open(market.url, timeout=self.nav_timeout)

                if not await reader.wait_for(ROW_SELECTOR, timeout=self.settle_timeout):
                    logger.warning(
                        f"No outcome rows on {market.url} after {self.settle_timeout:.0f}s, "
                        f"fields will fall back to defaults"
                    )

                rows = await reader.read_rows(ROW_SELECTOR, FIELD_SELECTORS, MAX_OUTCOMES)
                total_text = await reader.read_text(TOTAL_VOLUME_SELECTOR)
        except ScrapeError as e:
            e.market_key = market.key
            logger.error(f"Scrape failed for {market.key}: {e}")
            raise
        except Exception as e:
            logger.exception(f"Page reader failed for {market.key}")
            raise ScrapeError(
                f"Page reader failed for {market.key}: {type(e).__name__}: {e}",
                market_key=market.key,
            ) from e

        snapshot = build_snapshot(rows, total_text)
        logger.info(
            f"{market.name}: {len(snapshot.outcomes)} outcomes, "
            f"total volume ${snapshot.total_volume:,}"
        )
        return snapshot
