"""Palette store loading."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import SchemeNotFoundError
from ..core.models import Scheme
from .toml import file_exists, load_model

logger = logging.getLogger(__name__)


def load_scheme(path: Path) -> Scheme:
    """Load the palette from a scheme.toml file.

    Args:
        path: Path to scheme.toml

    Returns:
        Parsed, immutable scheme
    """
    if not file_exists(path):
        raise SchemeNotFoundError(f"no scheme found at {path}")

    scheme = load_model(path, Scheme)
    logger.debug(f"Loaded {len(scheme.palette)} color(s) from {path}")
    return scheme
