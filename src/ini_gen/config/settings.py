"""
settings.py — User settings loader for ~/.config/ini-gen/.

Provides:
    settings_file()  — path of the settings.toml in effect
    load_settings()  — load parsed TOML settings merged over the defaults
    get_setting()    — dot-notation accessor with default
"""

import copy
import logging
import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from .defaults import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

SETTINGS_DIR = Path.home() / ".config" / "ini-gen"
SETTINGS_FILE = SETTINGS_DIR / "settings.toml"
SETTINGS_ENV = "INI_GEN_SETTINGS"


def settings_file() -> Path:
    """Return $INI_GEN_SETTINGS if set, else ~/.config/ini-gen/settings.toml."""
    override = os.environ.get(SETTINGS_ENV)
    if override:
        return Path(override).expanduser()
    return SETTINGS_FILE


def load_settings() -> dict:
    """Load settings.toml merged over DEFAULT_SETTINGS.

    A missing or unparsable file yields the defaults. Known keys whose
    value has a different type than the default are ignored.
    """
    settings = copy.deepcopy(DEFAULT_SETTINGS)
    path = settings_file()
    if not path.exists():
        return settings
    try:
        with open(path, "rb") as f:
            user = tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring settings file %s: %s", path, e)
        return settings

    for section, values in user.items():
        defaults = settings.get(section)
        if not (isinstance(values, dict) and isinstance(defaults, dict)):
            settings[section] = values
            continue
        for key, val in values.items():
            if key in defaults and type(val) is not type(defaults[key]):
                logger.warning(
                    "Ignoring setting %s.%s = %r: expected %s",
                    section, key, val, type(defaults[key]).__name__,
                )
                continue
            defaults[key] = val
    return settings


def get_setting(key_path: str, default=None):
    """Dot-notation accessor, e.g. get_setting("output.encoding", "utf-8")."""
    settings = load_settings()
    parts = key_path.split(".")
    current = settings
    for part in parts:
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return default
    return current
