"""Styling metadata extraction for styleable type declarations."""

from .builder import BuildResult, StyleableInfoBuilder, style_applier_name
from .descriptor import DeclarationDescriptor
from .errors import (
    Diagnostic,
    DiagnosticSink,
    MalformedDeclarationError,
    ProcessorError,
    ResolutionError,
)
from .models import (
    AnnotatedType,
    AttrInfo,
    MemberIndex,
    StyleableAnnotation,
    StyleableFieldInfo,
    StyleableInfo,
    StyleDeclaration,
    StyleInfo,
    TypeRef,
)
from .processor import RoundOutcome, StyleProcessor

__all__ = [
    "AnnotatedType",
    "AttrInfo",
    "BuildResult",
    "DeclarationDescriptor",
    "Diagnostic",
    "DiagnosticSink",
    "MalformedDeclarationError",
    "MemberIndex",
    "ProcessorError",
    "ResolutionError",
    "RoundOutcome",
    "StyleDeclaration",
    "StyleInfo",
    "StyleProcessor",
    "StyleableAnnotation",
    "StyleableFieldInfo",
    "StyleableInfo",
    "StyleableInfoBuilder",
    "TypeRef",
    "style_applier_name",
]
