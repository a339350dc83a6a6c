"""Error taxonomy for the render pipeline."""

from __future__ import annotations


class MeiyaError(Exception):
    """Base class for every failure surfaced to the user."""

    kind = "Error"

    def __str__(self) -> str:
        return f"{self.kind}: {super().__str__()}"


class IoError(MeiyaError):
    """Raised when a file cannot be read or written."""

    kind = "IO error"


class SchemeNotFoundError(IoError):
    """Raised when scheme.toml does not exist."""


class UnitMissingError(IoError):
    """Raised when a template unit lacks its body or directive file."""

    def __init__(self, unit: str, missing: str) -> None:
        super().__init__(f"template unit '{unit}' is missing '{missing}'")
        self.unit = unit
        self.missing = missing


class ConfigParseError(MeiyaError):
    """Raised when a TOML file is malformed or fails validation."""

    kind = "TOML parsing error"
