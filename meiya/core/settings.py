"""Runtime configuration resolved from the environment and CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_config_path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import IoError

logger = logging.getLogger(__name__)

SCHEME_FILENAME = "scheme.toml"
TEMPLATES_DIRNAME = "templates"


def default_config_dir() -> Path:
    return user_config_path("meiya")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MEIYA_", case_sensitive=False)

    config_dir: Path = Field(default_factory=default_config_dir)
    templates_dir: Path | None = None

    @property
    def scheme_path(self) -> Path:
        return self.config_dir.expanduser() / SCHEME_FILENAME

    @property
    def resolved_templates_dir(self) -> Path:
        if self.templates_dir is not None:
            return self.templates_dir.expanduser()
        return self.config_dir.expanduser() / TEMPLATES_DIRNAME

    def ensure_config_dir(self) -> Path:
        """Create the config directory on first run."""
        config_dir = self.config_dir.expanduser()
        try:
            if not config_dir.exists():
                logger.debug(f"Creating config directory: {config_dir}")
                config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IoError(f"cannot create {config_dir}: {e}") from e
        return config_dir
