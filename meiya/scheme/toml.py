"""Shared TOML file loading with error mapping."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.errors import ConfigParseError, IoError

ModelT = TypeVar("ModelT", bound=BaseModel)


def file_exists(path: Path) -> bool:
    """Return whether path exists, mapping permission and other OS errors."""
    try:
        return path.exists()
    except OSError as e:
        raise IoError(f"cannot access {path}: {e}") from e


def format_validation_error(error: ValidationError) -> str:
    """Flatten pydantic validation errors into a single line."""
    return "; ".join(
        f"{'.'.join(map(str, err['loc'])) or '<root>'}: {err['msg']}"
        for err in error.errors()
    )


def read_toml(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Args:
        path: File to read

    Returns:
        Parsed TOML document
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"cannot read {path}: {e}") from e

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"{path}: {e}") from e


def load_model(path: Path, model: type[ModelT]) -> ModelT:
    """Parse a TOML file and validate it against a pydantic model."""
    data = read_toml(path)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"{path}: {format_validation_error(e)}") from e
