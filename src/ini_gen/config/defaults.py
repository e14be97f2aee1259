"""Built-in defaults for ini-gen.

Values from the user's settings.toml are merged over these,
section by section.
"""

DEFAULT_SETTINGS = {
    "general": {
        "log_level": "WARNING",
    },
    "input": {
        "default_format": "",
    },
    "output": {
        "encoding": "utf-8",
        "create_parents": False,
    },
}

FORMAT_SUFFIXES = {
    ".json": "json",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
}
