"""ini-gen: convert two-level config mappings to INI files."""

from .converter import convert, format_value, to_ini
from .errors import (
    ArgumentError,
    IniGenError,
    LoadError,
    SchemaError,
    WriteError,
)
from .loader import SUPPORTED_FORMATS, load_config
from .writer import write_output
