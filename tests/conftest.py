from __future__ import annotations

from pathlib import Path

import pytest

from tests.utils import write_scheme


@pytest.fixture()
def home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ~ at a temporary directory."""
    home_dir = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    return home_dir


@pytest.fixture()
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated meiya config directory with the default scheme."""
    cfg = tmp_path / "config" / "meiya"
    write_scheme(cfg)
    (cfg / "templates").mkdir()
    monkeypatch.setenv("MEIYA_CONFIG_DIR", str(cfg))
    monkeypatch.delenv("MEIYA_TEMPLATES_DIR", raising=False)
    return cfg
