"""Tests for the symbol table resource resolver."""

from __future__ import annotations

from pathlib import Path

import pytest

from stylemeta.errors import ResolutionError
from stylemeta.models import TypeRef
from stylemeta.resources import SymbolTableError, SymbolTableResolver, split_symbolic_id

_R_TXT = """
int attr titleSize 0x7f010000
int style Primary 0x7f010001
int style TitleView_Secondary 0x7f010002
int layout Primary 0x7f020001
int[] styleable TitleView { 0x7f010000 }
int styleable TitleView_titleSize 0
"""

OWNER = TypeRef("com.example.TitleView")


@pytest.mark.parametrize(
    ("symbolic_id", "expected"),
    [
        ("Primary", (None, "Primary")),
        ("style/Primary", ("style", "Primary")),
        ("@style/TitleView.Secondary", ("style", "TitleView_Secondary")),
        ("R.style.TitleView_Secondary", ("style", "TitleView_Secondary")),
        ("com.example.R.style.Primary", ("style", "Primary")),
    ],
)
def test_split_symbolic_id(symbolic_id: str, expected: tuple) -> None:
    assert split_symbolic_id(symbolic_id) == expected


def test_from_text_parses_int_entries() -> None:
    resolver = SymbolTableResolver.from_text(_R_TXT)

    assert len(resolver) == 5
    assert resolver.resolve(OWNER, "style", "Primary") == 0x7F010001
    assert resolver.resolve(OWNER, "style", "@style/TitleView.Secondary") == 0x7F010002
    assert resolver.resolve(OWNER, "attr", "titleSize") == 0x7F010000


def test_resolve_distinguishes_kinds() -> None:
    resolver = SymbolTableResolver.from_text(_R_TXT)

    with pytest.raises(ResolutionError) as excinfo:
        resolver.resolve(OWNER, "style", "layout/Primary")

    assert excinfo.value.type_ref == OWNER
    assert "is a layout" in excinfo.value.message


def test_resolve_unknown_name_raises() -> None:
    resolver = SymbolTableResolver({("style", "Primary"): 1})

    with pytest.raises(ResolutionError, match="Unknown style resource 'Missing'"):
        resolver.resolve(OWNER, "style", "Missing")


def test_resolve_empty_id_raises() -> None:
    with pytest.raises(ResolutionError):
        SymbolTableResolver().resolve(OWNER, "style", "  ")


def test_malformed_line_raises() -> None:
    with pytest.raises(SymbolTableError, match="line 2"):
        SymbolTableResolver.from_text("int style Primary 0x1\nnot a symbol\n")


def test_invalid_value_raises() -> None:
    with pytest.raises(SymbolTableError):
        SymbolTableResolver.from_text("int style Primary zz\n")


def test_from_path_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SymbolTableError, match="Failed to read"):
        SymbolTableResolver.from_path(tmp_path / "R.txt")
