"""
Volume Trend Reporting

Compares a freshly scraped total volume with the stored baseline for the
same market, then replaces the baseline with the new volume.

The baseline is overwritten on every query, so the change is always
relative to the previous check, never to a fixed daily anchor. The
narrative says so explicitly.
"""

from dataclasses import dataclass
from typing import Optional

from .storage import BaselineStore


@dataclass
class TrendResult:
    """Outcome of comparing a volume with its baseline."""
    market_key: str
    current_volume: int
    previous_volume: Optional[int]
    percent_change: Optional[float]  # None when the previous volume was 0
    narrative: str

    @property
    def is_first_observation(self) -> bool:
        return self.previous_volume is None


def percent_change(current: int, previous: int) -> Optional[float]:
    """
    Percent change rounded to one decimal.

    A previous volume of 0 has no defined ratio: 0 -> 0 is reported as
    0.0 and 0 -> anything else as None.
    """
    if previous == 0:
        return 0.0 if current == 0 else None
    return round((current - previous) / previous * 100, 1)


def format_change(change: Optional[float]) -> str:
    """Render a change as "+10.0%", "-2.5%" or "new volume"."""
    if change is None:
        return "new volume"
    # -0.0 can come out of round() for tiny negative changes
    if change == 0:
        change = 0.0
    return f"{'+' if change >= 0 else ''}{change:.1f}%"


def compute_trend(
    market_key: str,
    current_volume: int,
    store: BaselineStore,
) -> TrendResult:
    """
    Compute the volume trend for a market and update its baseline.

    Args:
        market_key: Market key (e.g., "london")
        current_volume: Total volume just scraped
        store: Baseline store; its entry for market_key is overwritten

    Returns:
        TrendResult with the rounded change and narrative text
    """
    previous = store.get(market_key)
    baseline = current_volume if previous is None else previous

    change = percent_change(current_volume, baseline)
    narrative = f"{format_change(change)} since last check"

    store.set(market_key, current_volume)

    return TrendResult(
        market_key=market_key,
        current_volume=current_volume,
        previous_volume=previous,
        percent_change=change,
        narrative=narrative,
    )
