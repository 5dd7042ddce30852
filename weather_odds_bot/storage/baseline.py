"""
Volume Baseline Stores

A baseline is the last-observed total volume for a market. It is
overwritten on every query, so each trend is relative to the previous
query rather than to a fixed daily anchor.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from ..config import get_all_markets
from .json_files import load_json_state, save_json_state


class BaselineStore(ABC):
    """Key-value store of market key -> last total volume."""

    @abstractmethod
    def get(self, market_key: str) -> Optional[int]:
        """Last stored volume, or None if the market was never observed."""

    @abstractmethod
    def set(self, market_key: str, volume: int) -> None:
        """Replace the stored volume for a market."""

    def updated_at(self, market_key: str) -> Optional[datetime]:
        """When the baseline was last written, if known."""
        return None


class InMemoryBaselineStore(BaselineStore):
    """Dict-backed store, used in tests and one-off runs."""

    def __init__(self, initial: Optional[dict[str, int]] = None):
        self._volumes: dict[str, int] = dict(initial or {})
        self._updated: dict[str, datetime] = {}

    def get(self, market_key: str) -> Optional[int]:
        return self._volumes.get(market_key)

    def set(self, market_key: str, volume: int) -> None:
        self._volumes[market_key] = volume
        self._updated[market_key] = datetime.now(timezone.utc)

    def updated_at(self, market_key: str) -> Optional[datetime]:
        return self._updated.get(market_key)

    def as_dict(self) -> dict[str, int]:
        return dict(self._volumes)


class JsonBaselineStore(BaselineStore):
    """
    Store persisted to volume.json.

    File shape: {"london": {"last": 1000, "updated_at": "..."}, "nyc": {}}
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._state: dict = load_json_state(
            self.path, {key: {} for key in get_all_markets()}
        )

    def get(self, market_key: str) -> Optional[int]:
        entry = self._state.get(market_key)
        if isinstance(entry, dict):
            entry = entry.get("last")
        if isinstance(entry, bool) or not isinstance(entry, (int, float)):
            return None
        return int(entry)

    def set(self, market_key: str, volume: int) -> None:
        self._state[market_key] = {
            "last": volume,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        save_json_state(self.path, self._state)

    def updated_at(self, market_key: str) -> Optional[datetime]:
        entry = self._state.get(market_key)
        if not isinstance(entry, dict) or not entry.get("updated_at"):
            return None
        try:
            return datetime.fromisoformat(entry["updated_at"])
        except (TypeError, ValueError):
            return None
