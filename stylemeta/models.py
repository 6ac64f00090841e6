"""Core data models shared across stylemeta components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Tuple

_CLASS_SUFFIXES = ("::class", ".class")


@dataclass(frozen=True)
class TypeRef:
    """Symbolic reference to a declared type.

    References are compared by qualified name only. They are never resolved
    while metadata is built, so a dependency may point at a type that is
    generated later in the same round.
    """

    qualified_name: str

    @classmethod
    def parse(cls, text: str) -> "TypeRef":
        name = str(text).strip()
        for suffix in _CLASS_SUFFIXES:
            if name.endswith(suffix):
                name = name[: -len(suffix)]
                break
        if not name:
            raise ValueError("Type reference must not be empty")
        if any(not segment.strip() for segment in name.split(".")):
            raise ValueError(f"Type reference '{name}' has an empty name segment")
        return cls(name)

    @property
    def namespace(self) -> str:
        head, _, _ = self.qualified_name.rpartition(".")
        return head

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rpartition(".")[2]

    def __str__(self) -> str:
        return self.qualified_name


@dataclass(frozen=True)
class StyleDeclaration:
    """A named style as written in the annotation (not yet resolved)."""

    name: str
    id: str


@dataclass(frozen=True)
class StyleableAnnotation:
    """Raw payload of the styleable annotation on a type."""

    value: str = ""
    dependencies: Tuple[TypeRef, ...] = ()
    styles: Tuple[StyleDeclaration, ...] = ()


@dataclass(frozen=True)
class AnnotatedType:
    """A type discovered by the scanner together with its annotation payload."""

    type: TypeRef
    annotation: StyleableAnnotation


@dataclass(frozen=True)
class StyleableFieldInfo:
    """A field whose value receives a style (opaque to the builder)."""

    name: str
    target_type: str
    styleable_resource_name: str
    index_name: str
    default_value: Optional[str] = None


@dataclass(frozen=True)
class AttrInfo:
    """A method annotated with an attr (opaque to the builder)."""

    name: str
    target_type: str
    styleable_resource_name: str
    index_name: str
    target_format: Optional[str] = None
    default_value: Optional[str] = None


@dataclass(frozen=True)
class StyleInfo:
    """A named style resolved to its resource handle."""

    name: str
    resource_handle: int


@dataclass(frozen=True)
class StyleableInfo:
    """Canonical styling metadata for one annotated type.

    If ``styleable_resource_name`` isn't empty then at least one of
    ``styleable_fields`` or ``attrs`` isn't empty either.
    """

    styleable_fields: Tuple[StyleableFieldInfo, ...]
    attrs: Tuple[AttrInfo, ...]
    namespace: str
    simple_name: str
    type_handle: TypeRef
    styleable_resource_name: str
    dependencies: Tuple[TypeRef, ...]
    styles: Tuple[StyleInfo, ...]


@dataclass
class MemberIndex:
    """Per-round scanner results keyed by type reference."""

    fields: Dict[TypeRef, Tuple[StyleableFieldInfo, ...]] = field(default_factory=dict)
    attrs: Dict[TypeRef, Tuple[AttrInfo, ...]] = field(default_factory=dict)

    @classmethod
    def from_mappings(
        cls,
        fields: Mapping[TypeRef, Iterable[StyleableFieldInfo]] | None = None,
        attrs: Mapping[TypeRef, Iterable[AttrInfo]] | None = None,
    ) -> "MemberIndex":
        return cls(
            fields={key: tuple(value) for key, value in (fields or {}).items()},
            attrs={key: tuple(value) for key, value in (attrs or {}).items()},
        )

    def fields_for(self, type_ref: TypeRef) -> Tuple[StyleableFieldInfo, ...]:
        return self.fields.get(type_ref, ())

    def attrs_for(self, type_ref: TypeRef) -> Tuple[AttrInfo, ...]:
        return self.attrs.get(type_ref, ())
