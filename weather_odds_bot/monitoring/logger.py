"""
Logging Configuration

Uses loguru for structured, colorful logging with:
- Console output with colors
- File rotation
- JSON snapshot log for later analysis
"""

import sys
from pathlib import Path
from loguru import logger

from ..config import config


def setup_logging(
    log_dir: str = None,
    log_level: str = None,
    rotation: str = "10 MB",
    retention: str = "30 days",
) -> None:
    """
    Configure logging for the application.

    Args:
        log_dir: Directory for log files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        rotation: Log file rotation size
        retention: How long to keep old logs
    """
    log_level = log_level or config.log_level
    log_path = Path(log_dir or config.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
        filter=lambda record: not record["extra"].get("snapshot_log", False),
    )

    logger.add(
        log_path / "weather_odds_bot.log",
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation=rotation,
        retention=retention,
        compression="gz",
        filter=lambda record: not record["extra"].get("snapshot_log", False),
    )

    # One JSON record per extracted snapshot
    logger.add(
        log_path / "snapshots.json",
        level="INFO",
        format="{message}",
        filter=lambda record: record["extra"].get("snapshot_log", False),
        rotation="1 day",
        retention="90 days",
        serialize=True,
    )

    logger.add(
        log_path / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}\n{exception}",
        rotation=rotation,
        retention=retention,
        compression="gz",
    )

    logger.bind(name="monitoring").info(f"Logging initialized at level {log_level}")


def get_logger(name: str = "weather_odds_bot"):
    """
    Get a named logger instance.

    Args:
        name: Logger name for context

    Returns:
        Logger instance bound to the name
    """
    return logger.bind(name=name)


class SnapshotLogger:
    """
    Specialized logger for scrape results.

    Writes one structured record per snapshot and trend computation.
    """

    def __init__(self):
        self.logger = logger.bind(snapshot_log=True, name="snapshots")

    def log_snapshot(self, market_key: str, snapshot, trend) -> None:
        """Log an extracted snapshot together with its volume trend."""
        self.logger.info({
            "event": "snapshot",
            "market": market_key,
            "fetched_at": snapshot.fetched_at.isoformat(),
            "total_volume": snapshot.total_volume,
            "outcomes": len(snapshot.outcomes),
            "previous_volume": trend.previous_volume,
            "percent_change": trend.percent_change,
        })

    def log_scrape_failure(self, market_key: str, error: str) -> None:
        self.logger.info({
            "event": "scrape_failure",
            "market": market_key,
            "error": error,
        })


# Global snapshot logger instance
snapshot_logger = SnapshotLogger()
