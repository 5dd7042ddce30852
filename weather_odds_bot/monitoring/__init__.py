"""
Monitoring module for logging.

Provides:
- Structured logging with loguru
- JSON snapshot records for every scrape
"""

from .logger import setup_logging, get_logger, SnapshotLogger, snapshot_logger

__all__ = ["setup_logging", "get_logger", "SnapshotLogger", "snapshot_logger"]
