"""Output writing for ini-gen."""

import logging
from pathlib import Path

from .errors import WriteError

logger = logging.getLogger(__name__)


def write_output(
    text: str,
    path,
    encoding: str = "utf-8",
    create_parents: bool = False,
) -> Path:
    """Write text to path verbatim.

    No newline translation is applied. Parent directories are created
    only when create_parents is set.

    Returns the path written.

    Raises:
        WriteError: the file (or its parent directory) could not be
            created or written, or text cannot be encoded. The message
            carries the underlying reason.
    """
    path = Path(path)
    try:
        data = text.encode(encoding)
    except LookupError as e:
        raise WriteError(f"unknown output encoding '{encoding}'") from e
    except UnicodeEncodeError as e:
        raise WriteError(
            f"cannot encode output as {encoding}: {e.reason} "
            f"(character {e.object[e.start:e.end]!r})"
        ) from e

    try:
        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(
            f"cannot write output file '{path}': {e.strerror or e}"
        ) from e

    logger.debug("Wrote %d characters to %s", len(text), path)
    return path
