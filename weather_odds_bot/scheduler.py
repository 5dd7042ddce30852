"""
Tracking Scheduler

Pushes reports for tracked markets to the configured chat at a fixed
interval. A failing market is reported and skipped; the others still run.
"""

from typing import Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .commands import SendFunc
from .config import config
from .errors import ScrapeError, TelegramError
from .formatting import format_error
from .monitoring import get_logger, snapshot_logger
from .reporter import MarketReporter
from .storage import TrackingState

logger = get_logger("scheduler")


class TrackingScheduler:
    """
    Manages the scheduled report push.
    """

    def __init__(
        self,
        reporter: MarketReporter,
        tracking: TrackingState,
        send: SendFunc,
        chat_id,
        interval_minutes: Optional[int] = None,
    ):
        """
        Initialize scheduler.

        Args:
            reporter: Produces market reports
            tracking: Which markets to push
            send: Coroutine sending (chat_id, text) to Telegram
            chat_id: Chat receiving the pushes
            interval_minutes: Minutes between pushes
        """
        self.reporter = reporter
        self.tracking = tracking
        self.send = send
        self.chat_id = chat_id
        self.interval_minutes = interval_minutes or config.track_interval_minutes
        self.scheduler = AsyncIOScheduler()

        self._running = False

    def setup_jobs(self):
        """Configure scheduled jobs."""
        self.scheduler.add_job(
            self.push_tracked,
            IntervalTrigger(minutes=self.interval_minutes),
            id="tracked_reports",
            name="Tracked Market Reports",
            max_instances=1,
            coalesce=True,
        )

        logger.info(f"Tracked reports every {self.interval_minutes} minutes")

    async def push_tracked(self) -> int:
        """
        Push a report for every tracked market.

        Returns:
            Number of messages delivered
        """
        markets = self.tracking.tracked_markets()
        if not markets:
            logger.debug("No tracked markets, skipping push")
            return 0

        delivered = 0

        for market_key in markets:
            try:
                text = (await self.reporter.report(market_key)).text
            except ScrapeError as e:
                logger.error(f"Scheduled scrape failed for {market_key}: {e}")
                snapshot_logger.log_scrape_failure(market_key, str(e))
                text = format_error(e)

            try:
                await self.send(self.chat_id, text)
            except TelegramError as e:
                logger.error(f"Failed to push {market_key} report: {e}")
                continue

            self.tracking.mark_pushed(market_key)
            delivered += 1

        logger.info(f"Pushed {delivered}/{len(markets)} tracked reports")
        return delivered

    def start(self):
        """Start the scheduler."""
        if self._running:
            logger.warning("Scheduler already running")
            return

        self._running = True
        self.setup_jobs()
        self.scheduler.start()
        logger.info("Scheduler started")

    def stop(self):
        """Stop the scheduler."""
        if not self._running:
            return

        self._running = False
        self.scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
