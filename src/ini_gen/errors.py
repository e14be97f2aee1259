"""Error types raised by ini-gen.

Library code raises these; only the CLI turns them into exit codes.
"""


class IniGenError(Exception):
    """Base class for every fatal ini-gen error."""

    exit_code = 1


class ArgumentError(IniGenError):
    """A required command-line argument is missing."""


class LoadError(IniGenError):
    """The input file is missing, unreadable, or not parseable."""


class SchemaError(IniGenError):
    """The input parsed, but its top-level value is not a mapping."""


class WriteError(IniGenError):
    """The output file could not be opened or written."""
