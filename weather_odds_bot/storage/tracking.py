"""
Tracking State

Which markets get their report pushed on the schedule, and when each was
last pushed. Persisted to tracking.json as
{"london": false, "nyc": true, "last": {"nyc": "2025-10-27T14:05:00+00:00"}}.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from ..config import get_all_markets
from .json_files import load_json_state, save_json_state


def get_default_tracking() -> dict:
    """Return default tracking state."""
    state: dict = {key: False for key in get_all_markets()}
    state["last"] = {}
    return state


class TrackingState:
    """Persistent on/off flags per market."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._state: dict = load_json_state(self.path, get_default_tracking())
        if not isinstance(self._state.get("last"), dict):
            self._state["last"] = {}

    def is_tracked(self, market_key: str) -> bool:
        return bool(self._state.get(market_key, False))

    def tracked_markets(self) -> list[str]:
        """Tracked market keys in configuration order."""
        return [key for key in get_all_markets() if self.is_tracked(key)]

    def set_tracked(self, market_key: str, tracked: bool) -> bool:
        """
        Turn tracking on or off.

        Returns:
            True if the flag changed
        """
        changed = self.is_tracked(market_key) != tracked
        self._state[market_key] = tracked
        save_json_state(self.path, self._state)
        return changed

    def mark_pushed(self, market_key: str, when: Optional[datetime] = None) -> None:
        when = when or datetime.now(timezone.utc)
        self._state["last"][market_key] = when.isoformat()
        save_json_state(self.path, self._state)

    def last_pushed(self, market_key: str) -> Optional[datetime]:
        value = self._state["last"].get(market_key)
        if not value:
            return None
        try:
            return datetime.fromisoformat(value)
        except (TypeError, ValueError):
            return None
