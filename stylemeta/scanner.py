"""Declarations manifest scanning.

The manifest is a YAML document listing every styleable type of a round::

    types:
      - name: com.example.TitleView
        styleable:
          value: TitleView
          dependencies: [com.example.BaseView]
          styles:
            - name: Primary
              id: "@style/TitleView.Primary"
        fields:
          - name: title
            type: TextView
        attrs:
          - name: setTitleSize
            type: int
            index: TitleView_titleSize
            format: dimension

Types are reported in manifest order.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

import yaml

from .logging import get_logger
from .models import (
    AnnotatedType,
    AttrInfo,
    MemberIndex,
    StyleableAnnotation,
    StyleableFieldInfo,
    StyleDeclaration,
    TypeRef,
)


class ManifestError(RuntimeError):
    """Raised when the declarations manifest is malformed."""


class SymbolScanner(Protocol):
    """Source of annotated types and their members for a processing round."""

    def scan_annotated_types(self) -> Sequence[AnnotatedType]:
        """Return every annotated type in declaration order."""

    def scan_styleable_members(self, type_ref: TypeRef) -> Sequence[StyleableFieldInfo]:
        """Return the style-able fields declared on ``type_ref``."""

    def scan_attrs(self, type_ref: TypeRef) -> Sequence[AttrInfo]:
        """Return the attrs declared on ``type_ref``."""


@dataclass
class _TypeEntry:
    declaration: AnnotatedType
    fields: Tuple[StyleableFieldInfo, ...]
    attrs: Tuple[AttrInfo, ...]


class ManifestScanner:
    """Reads annotated types from a parsed declarations manifest."""

    def __init__(self, data: Mapping[str, Any], *, source: str = "<manifest>") -> None:
        self.source = source
        self.logger = get_logger("scanner")
        self._entries: Dict[TypeRef, _TypeEntry] = {}
        self._parse(data)
        self.logger.debug("Loaded %d annotated types from %s", len(self._entries), source)

    @classmethod
    def from_path(cls, path: Path) -> "ManifestScanner":
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ManifestError(f"Failed to read declarations manifest {path}: {exc}") from exc
        return cls.from_text(text, source=str(path))

    @classmethod
    def from_text(cls, text: str, *, source: str = "<manifest>") -> "ManifestScanner":
        try:
            loaded = yaml.safe_load(text) if text.strip() else {}
        except yaml.YAMLError as exc:
            raise ManifestError(f"Failed to parse {source}: {exc}") from exc
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ManifestError(f"{source} must contain a mapping at the root")
        return cls(loaded, source=source)

    def scan_annotated_types(self) -> List[AnnotatedType]:
        return [entry.declaration for entry in self._entries.values()]

    def scan_styleable_members(self, type_ref: TypeRef) -> Tuple[StyleableFieldInfo, ...]:
        entry = self._entries.get(type_ref)
        return entry.fields if entry else ()

    def scan_attrs(self, type_ref: TypeRef) -> Tuple[AttrInfo, ...]:
        entry = self._entries.get(type_ref)
        return entry.attrs if entry else ()

    def member_index(self) -> MemberIndex:
        return build_member_index(self)

    # ------------------------------------------------------------------
    # Internal helpers

    def _parse(self, data: Mapping[str, Any]) -> None:
        types = data.get("types") or []
        if not isinstance(types, list):
            raise ManifestError(f"{self.source}: 'types' must be a list")
        for position, raw in enumerate(types):
            where = f"{self.source}: types[{position}]"
            if not isinstance(raw, dict):
                raise ManifestError(f"{where} must be a mapping")
            type_ref = _type_ref(raw.get("name"), where)
            if type_ref in self._entries:
                raise ManifestError(f"{where}: duplicate type '{type_ref}'")
            annotation = _parse_annotation(raw.get("styleable"), where)
            fields = tuple(
                _parse_field(item, annotation.value, f"{where}.fields[{index}]")
                for index, item in enumerate(_as_list(raw.get("fields"), f"{where}.fields"))
            )
            attrs = tuple(
                _parse_attr(item, annotation.value, f"{where}.attrs[{index}]")
                for index, item in enumerate(_as_list(raw.get("attrs"), f"{where}.attrs"))
            )
            self._entries[type_ref] = _TypeEntry(
                declaration=AnnotatedType(type=type_ref, annotation=annotation),
                fields=fields,
                attrs=attrs,
            )


def build_member_index(scanner: SymbolScanner) -> MemberIndex:
    """Collect per-type fields and attrs from any scanner into a MemberIndex."""
    index = MemberIndex()
    for declaration in scanner.scan_annotated_types():
        index.fields[declaration.type] = tuple(scanner.scan_styleable_members(declaration.type))
        index.attrs[declaration.type] = tuple(scanner.scan_attrs(declaration.type))
    return index


def _parse_annotation(raw: Any, where: str) -> StyleableAnnotation:
    if raw is None:
        return StyleableAnnotation()
    if isinstance(raw, str):
        return StyleableAnnotation(value=raw)
    if not isinstance(raw, dict):
        raise ManifestError(f"{where}.styleable must be a mapping or a string")

    value = _as_str(raw.get("value")) or ""
    dependencies = tuple(
        _type_ref(item, f"{where}.styleable.dependencies[{index}]")
        for index, item in enumerate(_as_list(raw.get("dependencies"), f"{where}.styleable.dependencies"))
    )
    styles: List[StyleDeclaration] = []
    for index, item in enumerate(_as_list(raw.get("styles"), f"{where}.styleable.styles")):
        style_where = f"{where}.styleable.styles[{index}]"
        if not isinstance(item, dict):
            raise ManifestError(f"{style_where} must be a mapping with 'name' and 'id'")
        name = _as_str(item.get("name"))
        style_id = _as_str(item.get("id"))
        if not name or not style_id:
            raise ManifestError(f"{style_where} requires both 'name' and 'id'")
        styles.append(StyleDeclaration(name=name, id=style_id))
    return StyleableAnnotation(value=value, dependencies=dependencies, styles=tuple(styles))


def _parse_field(raw: Any, styleable: str, where: str) -> StyleableFieldInfo:
    name, target_type, resource_name, index_name = _member_basics(raw, styleable, where)
    return StyleableFieldInfo(
        name=name,
        target_type=target_type,
        styleable_resource_name=resource_name,
        index_name=index_name,
        default_value=_as_str(raw.get("default")),
    )


def _parse_attr(raw: Any, styleable: str, where: str) -> AttrInfo:
    name, target_type, resource_name, index_name = _member_basics(raw, styleable, where)
    return AttrInfo(
        name=name,
        target_type=target_type,
        styleable_resource_name=resource_name,
        index_name=index_name,
        target_format=_as_str(raw.get("format")),
        default_value=_as_str(raw.get("default")),
    )


def _member_basics(raw: Any, styleable: str, where: str) -> Tuple[str, str, str, str]:
    if not isinstance(raw, dict):
        raise ManifestError(f"{where} must be a mapping")
    name = _as_str(raw.get("name"))
    if not name:
        raise ManifestError(f"{where} requires a 'name'")
    target_type = _as_str(raw.get("type")) or "java.lang.Object"
    resource_name = _as_str(raw.get("styleable")) or styleable
    index_name = _as_str(raw.get("index"))
    if not index_name:
        index_name = f"{resource_name}_{name}" if resource_name else name
    return name, target_type, resource_name, index_name


def _type_ref(value: Any, where: str) -> TypeRef:
    text = _as_str(value)
    if not text:
        raise ManifestError(f"{where} requires a type name")
    try:
        return TypeRef.parse(text)
    except ValueError as exc:
        raise ManifestError(f"{where}: {exc}") from exc


def _as_list(value: Any, where: str) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        return [value]
    raise ManifestError(f"{where} must be a list")


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value).strip() if isinstance(value, (str, int, float)) else None


__all__ = ["ManifestError", "ManifestScanner", "SymbolScanner", "build_member_index"]
