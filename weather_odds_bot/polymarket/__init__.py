"""
Polymarket integration module.

Handles:
- Rendering market pages behind a PageReader capability
- Best-effort extraction of outcome odds and volumes
"""

from .models import MarketSnapshot, Outcome, MAX_OUTCOMES
from .page_reader import PageReader
from .extractor import SnapshotExtractor, build_snapshot, parse_outcome

__all__ = [
    "MarketSnapshot",
    "Outcome",
    "MAX_OUTCOMES",
    "PageReader",
    "SnapshotExtractor",
    "build_snapshot",
    "parse_outcome",
]
