"""
Bot Main Loop

Wires the components together and runs them:
1. Load persisted state (baselines, tracking, history)
2. Long-poll Telegram for commands and answer them one at a time
3. Push reports for tracked markets on a schedule
"""

import asyncio
import signal
import sys
from typing import Optional

from .config import config, get_market_config
from .commands import CommandHandler
from .errors import ConfigError, ScrapeError, TelegramError, UsageError
from .monitoring import setup_logging, get_logger
from .polymarket import SnapshotExtractor
from .reporter import MarketReporter
from .scheduler import TrackingScheduler
from .storage import InMemoryBaselineStore, JsonBaselineStore, SnapshotHistory, TrackingState
from .telegram import TelegramClient

logger = get_logger("main")

# Pause after a failed getUpdates before polling again
POLL_ERROR_DELAY_SECONDS = 5.0


class OddsBot:
    """
    Telegram bot that reports Polymarket weather markets.
    """

    def __init__(self, schedule: bool = True):
        """
        Initialize the bot.

        Args:
            schedule: If True, push reports for tracked markets on an interval
        """
        self.schedule = schedule

        # Components (initialized lazily)
        self._telegram: Optional[TelegramClient] = None
        self._reporter: Optional[MarketReporter] = None
        self._tracking: Optional[TrackingState] = None
        self._handler: Optional[CommandHandler] = None
        self._scheduler: Optional[TrackingScheduler] = None

        self._running = False
        self._offset: Optional[int] = None

    async def initialize(self):
        """Initialize all components."""
        setup_logging()
        logger.info("Initializing Weather Odds Bot...")

        if not config.telegram.is_configured:
            raise ConfigError("Set TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID in the environment")

        storage = config.storage
        self._tracking = TrackingState(storage.tracking_file)
        self._reporter = MarketReporter(
            extractor=SnapshotExtractor(),
            baselines=JsonBaselineStore(storage.volume_file),
            history=SnapshotHistory(storage.trends_file, limit=storage.history_limit),
        )

        self._telegram = TelegramClient()
        chat_id = config.telegram.chat_id

        self._handler = CommandHandler(
            self._reporter, self._tracking, self._telegram.send_message, chat_id
        )

        if self.schedule:
            self._scheduler = TrackingScheduler(
                self._reporter, self._tracking, self._telegram.send_message, chat_id
            )

        logger.info(f"State directory: {storage.data_dir}")
        logger.info(f"Tracked markets: {self._tracking.tracked_markets() or 'none'}")

    async def close(self):
        """Clean up resources."""
        if self._scheduler:
            self._scheduler.stop()
        if self._telegram:
            await self._telegram.close()

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def poll_once(self) -> int:
        """
        Fetch one batch of updates and handle them in order.

        Returns:
            Number of updates processed
        """
        updates = await self._telegram.get_updates(offset=self._offset)

        for update in updates:
            self._offset = update["update_id"] + 1
            try:
                await self._handler.handle_update(update)
            except TelegramError as e:
                logger.error(f"Failed to reply to update {update['update_id']}: {e}")
            except Exception:
                logger.exception(f"Failed to handle update {update['update_id']}")

        return len(updates)

    async def run(self):
        """Poll for commands until stopped."""
        self._running = True

        if self._scheduler:
            self._scheduler.start()

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            try:
                loop.add_signal_handler(sig, self.stop)
            except NotImplementedError:
                pass

        logger.info("Bot started, polling for commands... Press Ctrl+C to stop")

        while self._running:
            try:
                await self.poll_once()
            except TelegramError as e:
                logger.error(f"Polling failed: {e}")
                await asyncio.sleep(POLL_ERROR_DELAY_SECONDS)
            except asyncio.CancelledError:
                break

        logger.info("Bot stopped")

    def stop(self):
        """Stop after the current poll returns."""
        logger.info("Shutdown signal received")
        self._running = False


async def report_once(market_key: str) -> int:
    """
    Print one report to stdout without touching Telegram or disk state.

    Returns:
        Process exit code
    """
    setup_logging()

    try:
        market = get_market_config(market_key)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 2

    reporter = MarketReporter(SnapshotExtractor(), InMemoryBaselineStore())
    try:
        report = await reporter.report(market.key)
    except ScrapeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(report.text)
    return 0


async def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Weather Odds Bot for Polymarket")
    parser.add_argument("--once", metavar="MARKET", default=None,
                        help="Print one report for MARKET (london, nyc) and exit")
    parser.add_argument("--no-schedule", action="store_true",
                        help="Disable scheduled reports for tracked markets")

    args = parser.parse_args(argv)

    if args.once:
        return await report_once(args.once)

    try:
        async with OddsBot(schedule=not args.no_schedule) as bot:
            await bot.run()
    except ConfigError as e:
        logger.error(str(e))
        return 1

    return 0


def run():
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
