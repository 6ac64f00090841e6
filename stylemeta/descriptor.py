"""Lightweight projection of an annotated type declaration."""

from __future__ import annotations

from dataclasses import dataclass

from .models import AnnotatedType, TypeRef


@dataclass(frozen=True)
class DeclarationDescriptor:
    """Namespace, name, handle and resource name of one styleable type."""

    namespace: str
    simple_name: str
    type_handle: TypeRef
    resource_name: str

    @classmethod
    def from_declaration(cls, declaration: AnnotatedType) -> "DeclarationDescriptor":
        type_ref = declaration.type
        return cls(
            namespace=type_ref.namespace,
            simple_name=type_ref.simple_name,
            type_handle=type_ref,
            resource_name=declaration.annotation.value or "",
        )


__all__ = ["DeclarationDescriptor"]
