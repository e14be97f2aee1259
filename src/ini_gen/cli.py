#!/usr/bin/env python3
"""
cli.py — Convert a JSON/TOML/YAML config file to an INI file.

Usage:
    ini-gen input.{json,toml,yaml} output.ini
    python3 -m ini_gen input.{json,toml,yaml} output.ini

Example input (config.toml):

    [database]
    host = "localhost"
    port = 5432
    enabled = true

    [server]
    host = "0.0.0.0"
    port = 8080

Each top-level table becomes an INI section, in file order.
Top-level values that are not tables are ignored.
"""

import logging
import sys

from .config.settings import get_setting
from .converter import to_ini
from .errors import ArgumentError, IniGenError
from .loader import load_config
from .writer import write_output

USAGE = "Usage: ini-gen <input_file> <output_file>"


def _print_help():
    print(USAGE)
    print()
    print("Reads a two-level config mapping from a JSON, TOML or YAML file")
    print("and writes it out as INI sections of 'key = value' lines.")


def parse_args(argv: list) -> tuple:
    """Return (input_path, output_path) from argv (without the program name).

    Raises:
        ArgumentError: if either path is missing.
    """
    if len(argv) < 2:
        raise ArgumentError("not enough arguments.")
    return argv[0], argv[1]


def convert_file(input_path, output_path) -> None:
    """Run the load → convert → write pipeline, printing progress."""
    print(f"Reading input file: {input_path}")
    config = load_config(input_path)

    print("Converting to INI format...")
    ini_text = to_ini(config)

    print(f"Writing output file: {output_path}")
    write_output(
        ini_text,
        output_path,
        encoding=get_setting("output.encoding", "utf-8"),
        create_parents=get_setting("output.create_parents", False),
    )

    print(f"\nSuccess! File '{output_path}' generated.")


def run(argv: list) -> int:
    """Run the CLI on argv and return the process exit code."""
    if argv and argv[0] in ("-h", "--help"):
        _print_help()
        return 0

    try:
        input_path, output_path = parse_args(argv)
        convert_file(input_path, output_path)
    except ArgumentError as e:
        print(f"Error: {e}")
        print(USAGE)
        return e.exit_code
    except IniGenError as e:
        print(f"Error: {e}")
        return e.exit_code
    return 0


def main():
    """Entry point for ini-gen CLI command."""
    level = str(get_setting("general.log_level", "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))

    code = run(sys.argv[1:])
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
