"""Persistent JSON config helpers.

Stores user defaults for the timestamp template and the ``--sort`` value.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .options import DEFAULT_SORT, DEFAULT_TIME_STYLE, normalize_sort_value

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep listing behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_time_style() -> str:
    """Return the persisted ``--time-style`` default.

    Only non-empty strings are accepted.
    """
    value = load_config().get("time_style")
    if isinstance(value, str) and value:
        return value
    return DEFAULT_TIME_STYLE


def save_time_style(time_style: str) -> None:
    """Persist the ``--time-style`` default."""
    config = load_config()
    config["time_style"] = time_style
    save_config(config)


def load_sort() -> str:
    """Return the persisted ``--sort`` default; unknown values are ignored."""
    value = load_config().get("sort")
    if isinstance(value, str) and normalize_sort_value(value) is not None:
        return value
    return DEFAULT_SORT


def save_sort(sort_value: str) -> None:
    """Persist the ``--sort`` default."""
    config = load_config()
    config["sort"] = sort_value
    save_config(config)
