"""
Chat message formatting.

Reports are plain text (no parse mode) so scraped labels never break
Markdown parsing.
"""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from .config import MarketConfig
from .polymarket import MarketSnapshot, MAX_OUTCOMES
from .trends import TrendResult

# West Africa Time, UTC+1 all year
WAT = ZoneInfo("Africa/Lagos")


def timestamp(now: Optional[datetime] = None) -> str:
    """Current time as "2025-10-27, 14:05 WAT"."""
    now = now or datetime.now(WAT)
    if now.tzinfo is None:
        now = now.replace(tzinfo=WAT)
    return now.astimezone(WAT).strftime("%Y-%m-%d, %H:%M") + " WAT"


def header(now: Optional[datetime] = None) -> str:
    return f"📅 {timestamp(now)}"


def format_report(
    market: MarketConfig,
    snapshot: MarketSnapshot,
    trend: TrendResult,
    now: Optional[datetime] = None,
) -> str:
    """
    Build the reply for a market snapshot.

    Args:
        market: Market the snapshot belongs to
        snapshot: Extracted snapshot
        trend: Volume trend for the snapshot
        now: Time shown in the header (default: now)

    Returns:
        Message text
    """
    lines = [f"{header(now)}: {market.label} TOP {MAX_OUTCOMES}"]

    if not snapshot.outcomes:
        lines.append("No outcomes found")

    for rank, o in enumerate(snapshot.outcomes, start=1):
        lines.append(f"{rank}. {o.name}: {o.probability}%")
        prices = f"{o.yes_price}¢/{o.no_price}¢"
        if o.change:
            prices += f" {o.change}"
        lines.append(f"   {prices} | ${o.volume} {o.tag}")

    lines.append("")
    lines.append(f"Total: ${snapshot.total_volume:,} ({trend.narrative})")
    return "\n".join(lines)


def format_start(now: Optional[datetime] = None) -> str:
    return f"{header(now)}: Use /current london"


def format_usage(command: str = "current") -> str:
    return f"Use: /{command} london or /{command} nyc"


def format_help() -> str:
    return "\n".join([
        "Commands:",
        "/current <london|nyc> - top 3 outcomes and volume trend",
        "/track <london|nyc> - push the report on a schedule",
        "/untrack <london|nyc> - stop scheduled reports",
        "/status - show tracked markets",
    ])


def format_error(error: Exception) -> str:
    return f"Error: {error}"
