"""Persistent JSON preferences.

Stores the last input file, output directory, indent width, and skip-root
choice. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "touchim"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_INPUT = "tree.txt"
DEFAULT_OUTPUT = "touchim-output"
DEFAULT_INDENT = 4


@dataclass(frozen=True)
class Preferences:
    input_file: str = DEFAULT_INPUT
    output_dir: str = DEFAULT_OUTPUT
    indent_spaces: int = DEFAULT_INDENT
    skip_root: bool = False


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

    Any filesystem/serialization error is ignored so a read-only config
    directory never blocks scaffolding.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_str(data: dict[str, object], key: str, default: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _load_positive_int(data: dict[str, object], key: str, default: int) -> int:
    """Booleans and non-positive integers are treated as invalid."""
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def load_preferences() -> Preferences:
    """Return stored preferences, substituting the default for any invalid key."""
    data = load_config()
    skip_root = data.get("skip_root")
    return Preferences(
        input_file=_load_str(data, "input_file", DEFAULT_INPUT),
        output_dir=_load_str(data, "output_dir", DEFAULT_OUTPUT),
        indent_spaces=_load_positive_int(data, "indent_spaces", DEFAULT_INDENT),
        skip_root=skip_root if isinstance(skip_root, bool) else False,
    )


def save_preferences(preferences: Preferences) -> None:
    """Merge ``preferences`` into the config file, keeping unrelated keys."""
    config = load_config()
    config.update(asdict(preferences))
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "DEFAULT_INPUT",
    "DEFAULT_OUTPUT",
    "DEFAULT_INDENT",
    "Preferences",
    "load_config",
    "save_config",
    "load_preferences",
    "save_preferences",
]
