"""Symbol table backed resource resolver (R.txt lookups)."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple

from ..errors import ResolutionError
from ..logging import get_logger
from ..models import TypeRef

_R_REFERENCE = re.compile(r"(?:^|\.)R\.(?P<kind>\w+)\.(?P<name>.+)$")


class SymbolTableError(RuntimeError):
    """Raised when a symbol table file cannot be parsed."""


class SymbolTableResolver:
    """Resolves ``(kind, name)`` pairs against a fixed table of handles."""

    def __init__(self, table: Mapping[Tuple[str, str], int] | None = None) -> None:
        self._table: Dict[Tuple[str, str], int] = dict(table or {})
        self.logger = get_logger("resources")

    @classmethod
    def from_text(cls, text: str) -> "SymbolTableResolver":
        return cls(_parse_symbol_table(text.splitlines()))

    @classmethod
    def from_path(cls, path: Path) -> "SymbolTableResolver":
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SymbolTableError(f"Failed to read symbol table {path}: {exc}") from exc
        return cls.from_text(text)

    def __len__(self) -> int:
        return len(self._table)

    def resolve(self, owner: TypeRef, kind: str, symbolic_id: str) -> int:
        parsed_kind, name = split_symbolic_id(symbolic_id)
        if not name:
            raise ResolutionError(owner, f"Empty {kind} resource id")
        if parsed_kind is not None and parsed_kind != kind:
            raise ResolutionError(
                owner,
                f"Resource '{symbolic_id}' is a {parsed_kind}, expected a {kind}",
            )
        handle = self._table.get((kind, name))
        if handle is None:
            raise ResolutionError(owner, f"Unknown {kind} resource '{symbolic_id}'")
        self.logger.debug("Resolved %s/%s to 0x%08x for %s", kind, name, handle, owner)
        return handle


def split_symbolic_id(symbolic_id: str) -> Tuple[Optional[str], str]:
    """Split ``@kind/Name``, ``kind/Name``, ``R.kind.Name`` or ``Name``.

    Dots in resource names become underscores, matching generated R fields.
    """
    text = symbolic_id.strip()
    kind: Optional[str] = None
    match = _R_REFERENCE.search(text)
    if match:
        kind, name = match.group("kind"), match.group("name")
    else:
        text = text.lstrip("@")
        if "/" in text:
            kind, name = text.split("/", 1)
        else:
            name = text
    return kind, name.strip().replace(".", "_")


def _parse_symbol_table(lines: Iterable[str]) -> Dict[Tuple[str, str], int]:
    table: Dict[Tuple[str, str], int] = {}
    for number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if parts[0] == "int[]":
            continue
        if parts[0] != "int" or len(parts) != 4:
            raise SymbolTableError(f"Malformed symbol table line {number}: {line}")
        _, kind, name, value = parts
        try:
            table[(kind, name)] = int(value, 0)
        except ValueError as exc:
            raise SymbolTableError(f"Invalid resource value on line {number}: {value}") from exc
    return table


__all__ = ["SymbolTableError", "SymbolTableResolver", "split_symbolic_id"]
