"""Template unit discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from ..core.errors import IoError, UnitMissingError
from ..core.models import Directive, TemplateUnit
from ..scheme.toml import file_exists, load_model

logger = logging.getLogger(__name__)

BASE_FILENAME = "base"
DIRECTIVE_FILENAME = "how.toml"


def load_directive(path: Path) -> Directive:
    """Load a unit's output directive from how.toml."""
    if not file_exists(path):
        raise UnitMissingError(path.parent.name, path.name)
    return load_model(path, Directive)


def load_unit(unit_dir: Path) -> TemplateUnit:
    """Load one template unit directory.

    Args:
        unit_dir: Directory holding ``base`` and ``how.toml``

    Returns:
        Template unit with its body and parsed directive
    """
    base_path = unit_dir / BASE_FILENAME
    if not file_exists(base_path):
        raise UnitMissingError(unit_dir.name, BASE_FILENAME)

    how = load_directive(unit_dir / DIRECTIVE_FILENAME)

    try:
        with base_path.open(encoding="utf-8", newline="") as handle:
            base = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"cannot read {base_path}: {e}") from e

    return TemplateUnit(name=unit_dir.name, source=unit_dir, base=base, how=how)


def discover_units(templates_dir: Path) -> Iterator[TemplateUnit]:
    """Yield template units found directly under templates_dir.

    Units come out in filesystem enumeration order. The first failing unit
    stops the iteration.

    Args:
        templates_dir: Directory whose children are template units

    Yields:
        Loaded template units
    """
    try:
        entries = os.scandir(templates_dir)
    except OSError as e:
        raise IoError(f"cannot list templates in {templates_dir}: {e}") from e

    with entries:
        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError as e:
                raise IoError(f"cannot access {entry.path}: {e}") from e
            if not is_dir:
                logger.debug(f"Skipping non-directory entry: {entry.path}")
                continue
            logger.debug(f"Discovered template unit: {entry.name}")
            yield load_unit(Path(entry.path))
