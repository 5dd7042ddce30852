"""
Configuration module for Weather Odds Bot.

Contains market mappings, Telegram credentials, scraper timeouts and
storage locations.
"""

from dataclasses import dataclass, field
from typing import Optional
import os
from dotenv import load_dotenv

from .errors import UsageError

load_dotenv()


def _env_bool(name: str, default: str = "true") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class MarketConfig:
    """Configuration for a reportable market."""
    key: str
    name: str
    event_slug: str  # Polymarket event slug, e.g. highest-temperature-in-london-on-october-27
    base_url: str = "https://polymarket.com/event"

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.event_slug}"

    @property
    def label(self) -> str:
        """Upper-cased key used in report headers."""
        return self.key.upper()


# Only these markets are recognized; anything else is a usage error
MARKET_CONFIGS: dict[str, MarketConfig] = {
    "london": MarketConfig(
        key="london",
        name="London",
        event_slug=os.getenv(
            "LONDON_EVENT_SLUG", "highest-temperature-in-london-on-october-27"
        ),
    ),
    "nyc": MarketConfig(
        key="nyc",
        name="New York City",
        event_slug=os.getenv(
            "NYC_EVENT_SLUG", "highest-temperature-in-new-york-city-on-october-27"
        ),
    ),
}


@dataclass
class TelegramConfig:
    """Telegram Bot API settings."""
    bot_token: Optional[str] = field(
        default_factory=lambda: os.getenv("TELEGRAM_BOT_TOKEN") or None
    )
    chat_id: Optional[str] = field(
        default_factory=lambda: os.getenv("TELEGRAM_CHAT_ID") or None
    )
    api_url: str = "https://api.telegram.org"
    poll_timeout_seconds: int = field(
        default_factory=lambda: int(os.getenv("POLL_TIMEOUT_SECONDS", "30"))
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.bot_token and self.chat_id)


@dataclass
class ScraperConfig:
    """Headless browser settings."""
    headless: bool = field(default_factory=lambda: _env_bool("HEADLESS"))
    nav_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("NAV_TIMEOUT_SECONDS", "30"))
    )
    # Upper bound on waiting for outcome rows to render after navigation
    settle_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("SETTLE_TIMEOUT_SECONDS", "8"))
    )


@dataclass
class StorageConfig:
    """Locations of the persisted JSON state files."""
    data_dir: str = field(default_factory=lambda: os.getenv("DATA_DIR", "data"))
    history_limit: int = 200

    @property
    def volume_file(self) -> str:
        return os.path.join(self.data_dir, "volume.json")

    @property
    def tracking_file(self) -> str:
        return os.path.join(self.data_dir, "tracking.json")

    @property
    def trends_file(self) -> str:
        return os.path.join(self.data_dir, "trends.json")


@dataclass
class Config:
    """Main configuration container."""
    telegram: TelegramConfig = field(default_factory=TelegramConfig)
    scraper: ScraperConfig = field(default_factory=ScraperConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)

    track_interval_minutes: int = field(
        default_factory=lambda: int(os.getenv("TRACK_INTERVAL_MINUTES", "60"))
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO")
    )
    log_dir: str = field(
        default_factory=lambda: os.getenv("LOG_DIR", "logs")
    )


# Global configuration instance
config = Config()


def get_market_config(market_key: str) -> MarketConfig:
    """Get configuration for a specific market."""
    market_key = (market_key or "").strip().lower()
    if market_key not in MARKET_CONFIGS:
        raise UsageError(
            f"Unknown market: {market_key or '(none)'}. Valid options: {list(MARKET_CONFIGS.keys())}"
        )
    return MARKET_CONFIGS[market_key]


def get_all_markets() -> list[str]:
    """Get list of all configured market keys."""
    return list(MARKET_CONFIGS.keys())
