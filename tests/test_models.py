"""Model validation tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from meiya.core.models import Directive, Scheme, WriteOutcome


class TestScheme:
    def test_alpha_bounds(self) -> None:
        assert Scheme(alpha=0, palette={}).alpha == 0
        assert Scheme(alpha=255, palette={}).alpha == 255
        with pytest.raises(ValidationError):
            Scheme(alpha=256, palette={})
        with pytest.raises(ValidationError):
            Scheme(alpha=-1, palette={})

    def test_palette_values_must_be_strings(self) -> None:
        with pytest.raises(ValidationError):
            Scheme(alpha=255, palette={"bg": 1})

    def test_palette_is_read_only(self) -> None:
        scheme = Scheme(alpha=255, palette={"bg": "#000000"})

        with pytest.raises(TypeError):
            scheme.palette["bg"] = "#ffffff"  # type: ignore[index]

        assert scheme.palette == {"bg": "#000000"}

    def test_palette_detached_from_input(self) -> None:
        colors = {"bg": "#000000"}
        scheme = Scheme(alpha=255, palette=colors)

        colors["bg"] = "#ffffff"

        assert scheme.palette["bg"] == "#000000"

    def test_scheme_is_frozen(self) -> None:
        scheme = Scheme(alpha=255, palette={"bg": "#000000"})
        with pytest.raises(ValidationError):
            scheme.alpha = 1  # type: ignore[misc]


class TestDirective:
    def test_leading_tilde_expanded(self, home: Path) -> None:
        how = Directive(nick="term", symlink=False, out="~/.termcfg")
        assert how.out == home / ".termcfg"

    def test_absolute_path_untouched(self, tmp_path: Path) -> None:
        how = Directive(nick="term", symlink=True, out=str(tmp_path / "out"))
        assert how.out == tmp_path / "out"
        assert how.symlink is True

    def test_all_fields_required(self) -> None:
        with pytest.raises(ValidationError):
            Directive(nick="term", out="~/x")  # type: ignore[call-arg]


def test_write_outcome_labels() -> None:
    assert WriteOutcome.NEW.label == "[new]"
    assert WriteOutcome.OVERWRITTEN.label == "[overwritten]"
