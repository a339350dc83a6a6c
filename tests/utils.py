from __future__ import annotations

import os
from pathlib import Path

SCHEME_TOML = """\
alpha = 255

[palette]
bg = "#101010"
fg = "#eeeeee"
"""

TERM_BASE = "background=$bg\nforeground=$fg\n"
TERM_HOW = 'nick = "term"\nsymlink = false\nout = "~/.termcfg"\n'


def write_scheme(config_dir: Path, content: str = SCHEME_TOML) -> Path:
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "scheme.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_unit(
    templates_dir: Path,
    name: str,
    *,
    base: str | None = TERM_BASE,
    how: str | None = TERM_HOW,
) -> Path:
    unit_dir = templates_dir / name
    unit_dir.mkdir(parents=True, exist_ok=True)
    if base is not None:
        (unit_dir / "base").write_text(base, encoding="utf-8")
    if how is not None:
        (unit_dir / "how.toml").write_text(how, encoding="utf-8")
    return unit_dir


def can_bypass_permissions() -> bool:
    """Root (and Windows) ignore a chmod(0) directory."""
    return os.name == "nt" or os.geteuid() == 0
