"""
Snapshot history persisted to trends.json.

Keeps the most recent snapshots across all markets, oldest dropped first.
"""

from pathlib import Path
from typing import Optional, Union

from .json_files import load_json_state, save_json_state


class SnapshotHistory:
    """Capped append-only list of snapshot records."""

    def __init__(self, path: Union[str, Path], limit: int = 200):
        self.path = Path(path)
        self.limit = limit
        self._records: list[dict] = load_json_state(self.path, [])

    def append(self, market_key: str, snapshot, percent_change: Optional[float]) -> dict:
        """Record a snapshot and persist the trimmed history."""
        record = {
            "market": market_key,
            **snapshot.to_dict(),
            "percent_change": percent_change,
        }
        self._records.append(record)
        if len(self._records) > self.limit:
            self._records = self._records[-self.limit:]
        save_json_state(self.path, self._records)
        return record

    def for_market(self, market_key: str) -> list[dict]:
        return [r for r in self._records if r.get("market") == market_key]

    def __len__(self) -> int:
        return len(self._records)
