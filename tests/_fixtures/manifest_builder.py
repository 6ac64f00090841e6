"""Helper utilities for writing declaration manifests in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path

from stylemeta.scanner import ManifestScanner


class ManifestBuilder:
    """Writes a throwaway project with a manifest, symbol table and config."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, relative: str, content: str) -> Path:
        """Write dedented ``content`` to ``relative`` and return the path."""
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    def manifest(self, content: str, name: str = "styleables.yml") -> Path:
        return self.write(name, content)

    def symbol_table(self, content: str, name: str = "R.txt") -> Path:
        return self.write(name, content)

    def scanner(self, name: str = "styleables.yml") -> ManifestScanner:
        return ManifestScanner.from_path(self.root / name)

    def path(self) -> Path:
        return self.root


__all__ = ["ManifestBuilder"]
