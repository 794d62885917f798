# config_manager.py
"""
Settings and persistence for the calculator.

- config.json      user settings (angle mode, display mode, decimals, theme)
- ui_strings.json  one description per setting, shown in the settings dialog
- storage.json     memory register and calculation history

Missing or unreadable files never stop the calculator: every loader falls
back to the built-in defaults below.
"""
import json
import logging
from collections import namedtuple
from enum import Enum
from pathlib import Path

from . import error as E

logger = logging.getLogger(__name__)

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"
storage_json = Path(__file__).resolve().parent.parent / "storage.json"


class AngleMode(Enum):
    DEG = "DEG"
    RAD = "RAD"
    GRAD = "GRAD"


class DisplayMode(Enum):
    NORM = "NORM"
    FIX = "FIX"
    SCI = "SCI"
    ENG = "ENG"


MIN_FIX_DECIMALS = 0
MAX_FIX_DECIMALS = 9

DEFAULT_SETTINGS = {
    "angle_mode": "DEG",
    "display_mode": "NORM",
    "fix_decimals": 2,
    "darkmode": False,
    "copy_on_result": False,
    "debug": False,
}

DEFAULT_DESCRIPTIONS = {
    "angle_mode": "Angle unit (DEG, RAD, GRAD)",
    "display_mode": "Display mode (NORM, FIX, SCI, ENG)",
    "fix_decimals": "Decimal places",
    "darkmode": "Dark mode",
    "copy_on_result": "Copy result to clipboard",
    "debug": "Debug logging",
}


# Read-only configuration handed to the engine for a single evaluation.
EngineConfig = namedtuple("EngineConfig", ["angle_mode", "display_mode", "fix_decimals"],
                          defaults=(AngleMode.DEG, DisplayMode.NORM, 2))


def clamp_decimals(value):
    """Return value as an int clamped to the supported FIX/SCI digit range."""
    try:
        value = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid decimal places %r, using default.", value)
        return DEFAULT_SETTINGS["fix_decimals"]
    return max(MIN_FIX_DECIMALS, min(MAX_FIX_DECIMALS, value))


def _read_json(path, fallback):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    except FileNotFoundError:
        return fallback
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not read %s: %s", path.name, e)
        return fallback


def _write_json(path, data):
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
            return True

    except (OSError, TypeError) as e:
        logger.warning("Could not write %s: %s", path.name, e)
        return False


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    stored = _read_json(config_json, {})
    if isinstance(stored, dict):
        settings_dict.update(stored)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    descriptions = dict(DEFAULT_DESCRIPTIONS)
    stored = _read_json(ui_strings, {})
    if isinstance(stored, dict):
        descriptions.update(stored)

    if key_value == "all":
        return descriptions

    else:
        return descriptions.get(key_value, key_value)


def save_setting(settings_dict):
    """Write settings_dict to config.json; return it, or {} if saving failed."""
    if _write_json(config_json, settings_dict):
        return settings_dict
    return {}


def _parse_mode(enum_class, value, key):
    if isinstance(value, enum_class):
        return value
    try:
        return enum_class(str(value).upper())
    except ValueError:
        logger.warning("%s%s=%r, using %s.", E.ERROR_MESSAGES["5001"], key, value, DEFAULT_SETTINGS[key])
        return enum_class(DEFAULT_SETTINGS[key])


def load_engine_config(settings=None):
    """Build an EngineConfig from a settings dict (or from config.json if None)."""
    if settings is None:
        settings = load_setting_value("all")

    return EngineConfig(
        angle_mode=_parse_mode(AngleMode, settings.get("angle_mode", "DEG"), "angle_mode"),
        display_mode=_parse_mode(DisplayMode, settings.get("display_mode", "NORM"), "display_mode"),
        fix_decimals=clamp_decimals(settings.get("fix_decimals", DEFAULT_SETTINGS["fix_decimals"])),
    )


# -----------------------------
# Memory / history storage
# -----------------------------

def _load_storage():
    stored = _read_json(storage_json, {})
    return stored if isinstance(stored, dict) else {}


def load_memory():
    try:
        return float(_load_storage().get("memory", 0))
    except (TypeError, ValueError):
        return 0.0


def save_memory(value):
    stored = _load_storage()
    stored["memory"] = value
    return _write_json(storage_json, stored)


def load_history():
    history = _load_storage().get("history", [])
    return history if isinstance(history, list) else []


def save_history(items):
    stored = _load_storage()
    stored["history"] = list(items)
    return _write_json(storage_json, stored)


if __name__ == "__main__":
    print(load_setting_value("all"))
    print(load_engine_config())
