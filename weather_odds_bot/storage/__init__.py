"""
Persisted bot state.

Provides:
- Volume baselines (volume.json)
- Market tracking flags (tracking.json)
- Snapshot history (trends.json)
"""

from .json_files import load_json_state, save_json_state
from .baseline import BaselineStore, InMemoryBaselineStore, JsonBaselineStore
from .tracking import TrackingState, get_default_tracking
from .history import SnapshotHistory

__all__ = [
    "load_json_state",
    "save_json_state",
    "BaselineStore",
    "InMemoryBaselineStore",
    "JsonBaselineStore",
    "TrackingState",
    "get_default_tracking",
    "SnapshotHistory",
]
