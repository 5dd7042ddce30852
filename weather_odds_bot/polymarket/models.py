"""
Market snapshot data structures.

A snapshot is built fresh for every request and discarded once the
report has been formatted; only its total volume outlives the request.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone


# Upstream pages list many temperature buckets; only the leaders are reported
MAX_OUTCOMES = 3


@dataclass
class Outcome:
    """A single temperature outcome row on a market page."""
    name: str = ""
    probability: int = 0  # Percent
    yes_price: int = 0    # Cents
    no_price: int = 0     # Cents
    change: str = ""      # Free text, e.g. "▲3%"
    volume: int = 0
    tag: str = "None"


@dataclass
class MarketSnapshot:
    """Best-effort view of a market page at one point in time."""
    total_volume: int = 0
    outcomes: list[Outcome] = field(default_factory=list)
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        self.outcomes = list(self.outcomes)[:MAX_OUTCOMES]
        self.total_volume = max(0, self.total_volume)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = asdict(self)
        d["fetched_at"] = self.fetched_at.isoformat()
        return d
