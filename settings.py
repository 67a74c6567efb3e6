"""JSON-based settings for calendar generation (read-only)."""

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_ENV = "CALENDAR_WIDGETS_SETTINGS"
_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".calendar-widgets-settings.json")

_DEFAULTS = {
    "default_locale": "en-US",
    "host_locale": "en-US",
    "date_options": {"year": "numeric", "month": "2-digit", "day": "2-digit"},
    "log_level": "WARNING",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_settings() -> dict:
    """Return a fresh copy of the built-in defaults."""
    settings = dict(_DEFAULTS)
    settings["date_options"] = dict(_DEFAULTS["date_options"])
    return settings


def settings_path() -> str:
    """Return the settings file location, honouring the environment override."""
    return os.environ.get(_SETTINGS_ENV) or _SETTINGS_PATH


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = default_settings()
    path = path or settings_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return settings
    for key in ("default_locale", "host_locale"):
        if key in stored and isinstance(stored[key], str) and stored[key]:
            settings[key] = stored[key]
    if "date_options" in stored and isinstance(stored["date_options"], dict):
        settings["date_options"] = {
            k: v for k, v in stored["date_options"].items()
            if isinstance(k, str) and isinstance(v, str)
        }
    if "log_level" in stored and isinstance(stored["log_level"], str):
        level = stored["log_level"].upper()
        if level in _LOG_LEVELS:
            settings["log_level"] = level
    return settings
