"""Domain models for palettes, directives and template units."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Scheme(BaseModel):
    """The palette every template is rendered against."""

    model_config = ConfigDict(frozen=True)

    alpha: int = Field(..., ge=0, le=255, description="Global opacity (reserved)")
    palette: Mapping[str, str] = Field(..., description="Color name to color value")

    @field_validator("palette", mode="after")
    @classmethod
    def _freeze_palette(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))


class Directive(BaseModel):
    """Output instructions parsed from a unit's how.toml."""

    model_config = ConfigDict(frozen=True)

    nick: str = Field(..., description="Display name used in status lines")
    symlink: bool = Field(..., description="Link instead of copy (not acted upon)")
    out: Path = Field(..., description="Destination path")

    @field_validator("out", mode="before")
    @classmethod
    def _expand_tilde(cls, value: object) -> object:
        if isinstance(value, (str, Path)):
            return Path(value).expanduser()
        return value


class TemplateUnit(BaseModel):
    """One discovered template directory."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Source directory name")
    source: Path = Field(..., description="Unit directory")
    base: str = Field(..., description="Raw template body")
    how: Directive


class WriteOutcome(str, Enum):
    NEW = "new"
    OVERWRITTEN = "overwritten"

    @property
    def label(self) -> str:
        return f"[{self.value}]"


class RenderResult(BaseModel):
    """Outcome of rendering and writing a single unit."""

    model_config = ConfigDict(frozen=True)

    unit_name: str
    nick: str
    output_path: Path
    outcome: WriteOutcome
