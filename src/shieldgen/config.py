"""Configuration file management for shieldgen.

Reads and writes ~/.shieldgen/config.json: default badge options applied
beneath every request's own options, and an optional extra icon file.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from shieldgen.resolver import OPTION_KEYS

DEFAULT_CONFIG_PATH: Path = Path.home() / ".shieldgen" / "config.json"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def get_default_options(config_path: Path | None = None) -> dict[str, str]:
    """Return the stored default options, skipping unknown keys."""
    raw = load_config(config_path).get("defaults")
    if not isinstance(raw, dict):
        return {}
    return {str(k): str(v) for k, v in raw.items() if k in OPTION_KEYS}


def set_default_option(key: str, value: str, config_path: Path | None = None) -> None:
    """Persist a default option. Raises ValueError for unrecognized keys."""
    if key not in OPTION_KEYS:
        raise ValueError(f"Unknown option {key!r}; expected one of {', '.join(sorted(OPTION_KEYS))}")
    config = load_config(config_path)
    defaults = config.get("defaults")
    if not isinstance(defaults, dict):
        defaults = {}
    defaults[key] = value
    config["defaults"] = defaults
    save_config(config, config_path)


def unset_default_option(key: str, config_path: Path | None = None) -> bool:
    """Remove a default option. Returns True if it was set."""
    config = load_config(config_path)
    defaults = config.get("defaults")
    if not isinstance(defaults, dict) or key not in defaults:
        return False
    del defaults[key]
    save_config(config, config_path)
    return True


def apply_defaults(options: Mapping[str, str], config_path: Path | None = None) -> dict[str, str]:
    """Options with configured defaults filled in; explicit options win."""
    merged = get_default_options(config_path)
    merged.update(options)
    return merged


def get_icons_path(config_path: Path | None = None) -> Path | None:
    """Return the configured extra icon file, or None if not set."""
    raw = load_config(config_path).get("icons_path")
    if raw:
        return Path(raw)
    return None


def set_icons_path(path: Path, config_path: Path | None = None) -> None:
    """Persist the extra icon file path to config."""
    config = load_config(config_path)
    config["icons_path"] = str(path)
    save_config(config, config_path)
