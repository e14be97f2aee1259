"""Input loading for ini-gen.

Parses a JSON, TOML, or YAML data file into a two-level config mapping.
Input files are parsed as data only; nothing in them is executed.
"""

import json
import logging
from pathlib import Path
from typing import Optional

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .config.defaults import FORMAT_SUFFIXES
from .config.settings import get_setting
from .errors import LoadError, SchemaError

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")

SUPPORTED_FORMATS = ("json", "toml", "yaml")


def load_json(path: Path):
    """Load a JSON file with BOM-safe encoding."""
    with open(path, "r", encoding="utf-8-sig") as f:
        return json.load(f)


def load_toml(path: Path):
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_yaml(path: Path):
    with open(path, "r", encoding="utf-8-sig") as f:
        return _yaml.load(f)


_LOADERS = {
    "json": load_json,
    "toml": load_toml,
    "yaml": load_yaml,
}


def detect_format(path: Path, fmt: Optional[str] = None) -> str:
    """Pick the input format: explicit fmt, then file suffix, then settings.

    Raises:
        LoadError: if no supported format can be determined.
    """
    if not fmt:
        fmt = FORMAT_SUFFIXES.get(path.suffix.lower())
    if not fmt:
        fmt = get_setting("input.default_format", "")
    if not fmt:
        raise LoadError(
            f"cannot tell the format of '{path}' from its extension "
            f"(expected one of: {', '.join(sorted(FORMAT_SUFFIXES))})"
        )
    fmt = fmt.lower()
    if fmt not in _LOADERS:
        raise LoadError(
            f"unsupported input format '{fmt}' "
            f"(supported: {', '.join(SUPPORTED_FORMATS)})"
        )
    return fmt


def load_config(path, fmt: Optional[str] = None) -> dict:
    """Read path and return its top-level mapping.

    Args:
        path: Input file.
        fmt: "json", "toml" or "yaml". Detected from the suffix if omitted.

    Raises:
        LoadError: the file is missing, unreadable or malformed.
        SchemaError: the file parsed to something other than a mapping.
    """
    path = Path(path)
    fmt = detect_format(path, fmt)
    logger.debug("Loading %s as %s", path, fmt)

    try:
        data = _LOADERS[fmt](path)
    except OSError as e:
        raise LoadError(f"cannot read '{path}': {e.strerror or e}") from e
    except (ValueError, RecursionError, YAMLError) as e:
        raise LoadError(f"cannot parse '{path}' as {fmt}: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(
            f"input file '{path}' must contain a mapping of sections, "
            f"got {type(data).__name__}"
        )
    logger.debug("Loaded %d top-level entries from %s", len(data), path)
    return data
