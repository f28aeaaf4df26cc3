"""
Writing rendered pages to disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_updated(path: str | Path, value: str | bytes) -> bool:
    """Update file contents if needed and return whether it was needed.

    The file is left untouched (including its modification time) when it
    already holds ``value``. Parent directories are created as needed.

    One way to use this is a test that fails in CI when a generated man page
    checked into the repository is out of date:

        >>> def test_manpage_is_current():
        ...     page = build_manpage().render()
        ...     assert not write_updated("doc/tool.1", page), "Regenerated doc/tool.1, commit it"

    Args:
        path: Destination file
        value: New content; strings are encoded as UTF-8

    Returns:
        True if the file was written, False if it was already up to date

    Raises:
        OSError: On any file I/O error
    """
    path = Path(path)
    data = value.encode("utf-8") if isinstance(value, str) else value

    if path.exists() and path.read_bytes() == data:
        logger.debug("%s is up to date", path)
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.debug("Wrote %d byte(s) to %s", len(data), path)
    return True
