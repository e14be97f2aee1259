"""
converter.py — Render a two-level config mapping as INI text.

Handles the flat-section structure {"section": {"key": value, ...}, ...}.
Values are written by their textual form: no quoting, no escaping,
no nested tables.
"""

from collections.abc import Mapping


def to_ini(config: Mapping) -> str:
    """Serialize a flat-section mapping to INI text.

    Sections and keys keep the mapping's insertion order. Top-level
    entries that are not mappings are skipped. Every section, the last
    one included, is followed by a blank line.

    Returns "" for an empty mapping.
    """
    lines = []
    for section, values in config.items():
        if not isinstance(values, Mapping):
            continue
        lines.append(f"[{section}]")
        for key, val in values.items():
            lines.append(f"{key} = {format_value(val)}")
        lines.append("")

    return "\n".join(lines)


def format_value(val) -> str:
    if isinstance(val, bool):
        return "true" if val else "false"
    if val is None:
        return ""
    # Everything else, nested containers included, is written as str()
    return str(val)


# Name used for the pipeline's conversion step
convert = to_ini
