"""Persistent JSON config holding default CLI options.

Stores default ignore rules and default depth level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "treescribe"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("Ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON."""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def load_default_ignore() -> list[str]:
    """Return configured ignore rules, keeping only non-empty strings."""
    value = load_config().get("ignore")
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def save_default_ignore(rules: list[str]) -> None:
    config = load_config()
    config["ignore"] = [rule for rule in rules if rule]
    save_config(config)


def load_default_level() -> int | None:
    """Return the configured depth level.

    Booleans, negative numbers, and non-integers are treated as unset.
    """
    value = load_config().get("level")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def save_default_level(level: int | None) -> None:
    config = load_config()
    if level is None:
        config.pop("level", None)
    else:
        config["level"] = level
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_default_ignore",
    "save_default_ignore",
    "load_default_level",
    "save_default_level",
]
