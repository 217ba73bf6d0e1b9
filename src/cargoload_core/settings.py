from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "container_width": 1000.0,
    "container_height": 800.0,
    "allow_rotation": True,
    "grid_step": 50.0,
    "tick_step": 10.0,
    "colormap": "tab20",
    "unit": "cm",
}


def settings_path() -> str:
    env_path = os.getenv("CARGOLOAD_SETTINGS")
    if env_path:
        return str(Path(env_path).expanduser().resolve())
    return os.path.join(os.path.dirname(__file__), "settings.yaml")


def _coerce(key: str, value: Any) -> Any:
    default = DEFAULT_SETTINGS[key]
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ValueError(f"{key} must be true or false")
        return value
    if isinstance(default, float):
        if isinstance(value, bool):
            raise ValueError(f"{key} must be a number")
        result = float(value)
        if result <= 0:
            raise ValueError(f"{key} must be positive")
        return result
    return str(value)


@lru_cache(maxsize=None)
def load_settings() -> Dict[str, Any]:
    """Load settings from ``settings.yaml`` merged over :data:`DEFAULT_SETTINGS`."""

    path = settings_path()
    data: Dict[str, Any] = {}
    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to read settings from %s", path)
            loaded = {}
        if isinstance(loaded, dict):
            data = loaded
        else:
            logger.warning("Ignoring settings file %s: not a mapping", path)

    settings = DEFAULT_SETTINGS.copy()
    for key in DEFAULT_SETTINGS:
        if key not in data:
            continue
        try:
            settings[key] = _coerce(key, data[key])
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid setting %s=%r", key, data[key])
    return settings
