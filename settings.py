from __future__ import annotations

"""HUD configuration loaded from environment variables and ``settings.json``.

The module provides a central location for runtime options.  Environment
variables take precedence over values stored in the JSON file found next to
this module.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Tuple

logger = logging.getLogger(__name__)

# Path to the JSON configuration file bundled with the HUD
SETTINGS_FILE = Path(__file__).with_name("settings.json")

try:
    with SETTINGS_FILE.open("r", encoding="utf-8") as f:
        _FILE_SETTINGS: Dict[str, Any] = json.load(f)
except Exception:
    # If the settings file is missing or invalid, fall back to defaults
    _FILE_SETTINGS = {}


def _get_bool(env_var: str, key: str, default: bool = False) -> bool:
    """Return a boolean setting from ``env_var`` or ``key`` in the JSON file."""
    value = os.environ.get(env_var)
    if value is not None:
        return value.lower() not in ("0", "false", "")
    return bool(_FILE_SETTINGS.get(key, default))


def _get_int(env_var: str, key: str, default: int, minimum: int = 1) -> int:
    """Return an integer setting from environment or JSON.

    Values that cannot be parsed or fall below ``minimum`` are rejected with a
    warning and ``default`` is used instead.
    """
    raw = os.environ.get(env_var)
    if raw is None:
        raw = _FILE_SETTINGS.get(key, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid value %r for %s", raw, key)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d below minimum %d", key, value, minimum)
        return default
    return value


def _joystick_sizes(default_base: int = 120, default_stick: int = 50) -> Tuple[int, int]:
    """Return the joystick base and knob diameters.

    The knob must be smaller than the base or it has nowhere to travel, so an
    inconsistent pair is replaced by the defaults.
    """
    base = _get_int("HUD_JOYSTICK_SIZE", "joystick_size", default_base)
    stick = _get_int("HUD_JOYSTICK_STICK_SIZE", "joystick_stick_size", default_stick)
    if stick >= base:
        logger.warning(
            "Ignoring joystick_stick_size=%d not smaller than joystick_size=%d",
            stick,
            base,
        )
        return default_base, default_stick
    return base, stick


# ---------------------------------------------------------------------------
# Public settings
# ---------------------------------------------------------------------------
# Clamped markers sit 8px inside each border, so smaller maps have no room
MINIMAP_MIN_SIZE = 17

# Pixel size of the square minimap
MINIMAP_SIZE: int = _get_int(
    "HUD_MINIMAP_SIZE", "minimap_size", 150, minimum=MINIMAP_MIN_SIZE
)

# Tiles shown on each side of the player
MINIMAP_RADIUS: int = _get_int("HUD_MINIMAP_RADIUS", "minimap_radius", 40)

# Draw the Spawn/Death legend under the minimap
SHOW_LEGEND: bool = _get_bool("HUD_SHOW_LEGEND", "show_legend", True)

# Virtual joystick base and knob diameters in pixels
JOYSTICK_SIZE, JOYSTICK_STICK_SIZE = _joystick_sizes()

# Build the on-screen joystick and buttons in the demo
TOUCH_CONTROLS: bool = _get_bool("HUD_TOUCH_CONTROLS", "touch_controls", True)

_DEFAULT_KEYMAP: Dict[str, str] = {
    "up": "w",
    "left": "a",
    "down": "s",
    "right": "d",
    "sprint": "shift",
}

_FILE_KEYMAP = _FILE_SETTINGS.get("keymap", {}) if isinstance(_FILE_SETTINGS, dict) else {}
KEYMAP: Dict[str, str] = {**_DEFAULT_KEYMAP, **_FILE_KEYMAP}


def save_settings(**kwargs: Any) -> None:
    """Persist ``kwargs`` to :data:`SETTINGS_FILE`."""
    data: Dict[str, Any] = {}
    if SETTINGS_FILE.exists():
        try:
            with SETTINGS_FILE.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception:
            data = {}
    data.update(kwargs)
    with SETTINGS_FILE.open("w", encoding="utf-8") as f:
        json.dump(data, f)


def remap_key(action: str, key: str) -> None:
    """Assign ``key`` to the movement ``action`` and persist the mapping."""

    KEYMAP[action] = key
    save_settings(keymap=KEYMAP)


__all__ = [
    "MINIMAP_SIZE",
    "MINIMAP_RADIUS",
    "SHOW_LEGEND",
    "JOYSTICK_SIZE",
    "JOYSTICK_STICK_SIZE",
    "TOUCH_CONTROLS",
    "KEYMAP",
    "save_settings",
    "remap_key",
]
