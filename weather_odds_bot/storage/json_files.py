"""
JSON State Files

Each state file holds one JSON object or list. Files are read once at
startup (a default is written if absent) and rewritten wholesale on every
mutation; there is no incremental or transactional update.
"""

import copy
import json
from pathlib import Path
from typing import Any, Union

from ..monitoring import get_logger

logger = get_logger("storage")


def load_json_state(path: Union[str, Path], default: Any) -> Any:
    """
    Load state from disk, creating the file with the default if absent.

    A corrupt file is logged and replaced by the default.

    Args:
        path: State file location
        default: Value to use (and persist) when no usable file exists

    Returns:
        The loaded state, or a copy of the default
    """
    path = Path(path)
    try:
        if path.exists():
            with open(path, "r") as f:
                state = json.load(f)
            if isinstance(state, type(default)):
                return state
            logger.warning(
                f"Unexpected {type(state).__name__} in {path}, resetting to default"
            )
    except (OSError, ValueError) as e:
        logger.error(f"Error loading {path}: {e}")

    state = copy.deepcopy(default)
    save_json_state(path, state)
    return state


def save_json_state(path: Union[str, Path], state: Any) -> bool:
    """Overwrite a state file with the given value."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(state, f, indent=2, default=str)
        return True
    except OSError as e:
        logger.error(f"Error saving {path}: {e}")
        return False
