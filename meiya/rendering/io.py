"""File I/O operations for rendering."""

from __future__ import annotations

from pathlib import Path

from ..core.errors import IoError
from ..core.models import WriteOutcome


def write_output(path: Path, text: str) -> WriteOutcome:
    """Write rendered text to path, replacing any existing content.

    Parent directories are not created.

    Args:
        path: Destination file path
        text: Rendered text

    Returns:
        OVERWRITTEN if the path already existed, NEW otherwise
    """
    try:
        existed = path.exists()
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        raise IoError(f"cannot write {path}: {e}") from e
    return WriteOutcome.OVERWRITTEN if existed else WriteOutcome.NEW
