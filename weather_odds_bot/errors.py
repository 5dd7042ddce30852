"""
Exception types raised across the bot.

Field-level parse failures are never errors; only these are.
"""

from typing import Optional


class WeatherOddsBotError(Exception):
    """Base class for all bot errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UsageError(WeatherOddsBotError):
    """Invalid command argument, reported straight back to the user."""


class ScrapeError(WeatherOddsBotError):
    """Navigation, timeout or browser failure while extracting a snapshot."""

    def __init__(self, message: str, market_key: Optional[str] = None):
        self.market_key = market_key
        super().__init__(message)


class TelegramError(WeatherOddsBotError):
    """The Bot API rejected a request or returned an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ConfigError(WeatherOddsBotError):
    """Required settings are missing at startup."""
