"""Placeholder substitution engine."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from ..core.models import RenderResult, Scheme, TemplateUnit
from .io import write_output

logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "$"


def render_text(body: str, scheme: Scheme) -> str:
    """Substitute ``$name`` placeholders with palette values.

    Plain substring replacement, one color at a time in palette order.
    Tokens without a matching color are left as they are. A color name that
    is a prefix of another (``red`` and ``red2``) can eat into the longer
    token if it is replaced first.

    Args:
        body: Raw template text
        scheme: Palette to substitute from

    Returns:
        Rendered text
    """
    for name, value in scheme.palette.items():
        body = body.replace(f"{PLACEHOLDER_PREFIX}{name}", value)
    return body


def render_unit(unit: TemplateUnit, scheme: Scheme) -> RenderResult:
    """Render a single template unit and write it to its destination.

    Args:
        unit: Template unit to render
        scheme: Palette to substitute from

    Returns:
        Where the output went and whether it replaced an existing file
    """
    logger.debug(f"Rendering template unit: {unit.name}")

    if unit.how.symlink:
        logger.debug(f"Unit {unit.name} requests a symlink; writing a copy")

    rendered_text = render_text(unit.base, scheme)
    outcome = write_output(unit.how.out, rendered_text)
    logger.info(f"Rendered {unit.source} → {unit.how.out}")

    return RenderResult(
        unit_name=unit.name,
        nick=unit.how.nick,
        output_path=unit.how.out,
        outcome=outcome,
    )


def render_all(units: Iterable[TemplateUnit], scheme: Scheme) -> Iterator[RenderResult]:
    """Render units one by one, stopping at the first failure.

    Args:
        units: Template units, typically from discovery
        scheme: Palette shared by every unit

    Yields:
        One result per rendered unit
    """
    count = 0
    for unit in units:
        yield render_unit(unit, scheme)
        count += 1

    logger.info(f"Successfully rendered {count} template unit(s)")
