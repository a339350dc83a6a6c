"""Meiya - color-scheme template renderer.

Renders every template unit under the config directory against a single
palette so that many config files share one color scheme.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
