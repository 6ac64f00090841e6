"""Builds canonical StyleableInfo records from raw declaration data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .descriptor import DeclarationDescriptor
from .errors import DiagnosticSink, MalformedDeclarationError, ProcessorError, ResolutionError
from .logging import get_logger
from .models import (
    AnnotatedType,
    AttrInfo,
    MemberIndex,
    StyleableFieldInfo,
    StyleableInfo,
    StyleInfo,
    TypeRef,
)
from .resources import ResourceResolver

STYLE_APPLIER_NAME_FORMAT = "{}StyleApplier"
STYLE_RESOURCE_KIND = "style"
ANNOTATION_ELEMENT = "@Styleable"


@dataclass(frozen=True)
class BuildResult:
    """Either a built record or the error that prevented it."""

    type_ref: TypeRef
    info: Optional[StyleableInfo] = None
    error: Optional[ProcessorError] = None

    def __post_init__(self) -> None:
        if (self.info is None) == (self.error is None):
            raise ValueError("BuildResult requires exactly one of info or error")

    @property
    def ok(self) -> bool:
        return self.info is not None


class StyleableInfoBuilder:
    """Extracts and validates styling metadata for annotated types."""

    def __init__(self, resolver: ResourceResolver) -> None:
        self.resolver = resolver
        self.logger = get_logger("builder")

    def build(
        self,
        declaration: AnnotatedType,
        styleable_fields: Sequence[StyleableFieldInfo] = (),
        attrs: Sequence[AttrInfo] = (),
    ) -> BuildResult:
        """Build one record; failures come back in the result, never raised."""
        try:
            info = self._build(declaration, tuple(styleable_fields), tuple(attrs))
        except ProcessorError as exc:
            self.logger.debug("Rejected %s: %s", declaration.type, exc.message)
            return BuildResult(type_ref=declaration.type, error=exc)
        self.logger.debug(
            "Built %s (%d fields, %d attrs, %d dependencies, %d styles)",
            info.type_handle,
            len(info.styleable_fields),
            len(info.attrs),
            len(info.dependencies),
            len(info.styles),
        )
        return BuildResult(type_ref=declaration.type, info=info)

    def build_all(
        self,
        declarations: Iterable[AnnotatedType],
        members: MemberIndex,
        sink: DiagnosticSink,
    ) -> Tuple[StyleableInfo, ...]:
        """Build every declaration independently, reporting failures to ``sink``."""
        infos: List[StyleableInfo] = []
        for declaration in declarations:
            result = self.build(
                declaration,
                members.fields_for(declaration.type),
                members.attrs_for(declaration.type),
            )
            if result.info is not None:
                infos.append(result.info)
            elif result.error is not None:
                sink.report(result.error)
        return tuple(infos)

    def _build(
        self,
        declaration: AnnotatedType,
        styleable_fields: Tuple[StyleableFieldInfo, ...],
        attrs: Tuple[AttrInfo, ...],
    ) -> StyleableInfo:
        descriptor = DeclarationDescriptor.from_declaration(declaration)
        owner = descriptor.type_handle
        annotation = declaration.annotation

        # Dependencies stay symbolic; the referenced types may not exist yet.
        dependencies = tuple(dict.fromkeys(annotation.dependencies))

        styles: List[StyleInfo] = []
        for position, style in enumerate(annotation.styles):
            element = f"styles[{position}]"
            try:
                handle = self.resolver.resolve(owner, STYLE_RESOURCE_KIND, style.id)
            except ResolutionError as exc:
                raise ResolutionError(owner, exc.message, element=exc.element or element) from exc
            styles.append(StyleInfo(name=style.name, resource_handle=handle))

        resource_name = descriptor.resource_name
        if not (resource_name or dependencies or styles):
            raise MalformedDeclarationError(
                owner,
                "@Styleable declaration must have at least a value, or a dependency, or a style",
                element=ANNOTATION_ELEMENT,
            )
        if resource_name and not (styleable_fields or attrs):
            raise MalformedDeclarationError(
                owner,
                "Do not specify the @Styleable value parameter if no class members are annotated with @Attr",
                element="value",
            )

        return StyleableInfo(
            styleable_fields=styleable_fields,
            attrs=attrs,
            namespace=descriptor.namespace,
            simple_name=descriptor.simple_name,
            type_handle=owner,
            styleable_resource_name=resource_name,
            dependencies=dependencies,
            styles=tuple(styles),
        )


def style_applier_simple_name(info: StyleableInfo) -> str:
    return STYLE_APPLIER_NAME_FORMAT.format(info.simple_name)


def style_applier_name(info: StyleableInfo) -> str:
    """Qualified name of the style applier generated for ``info``."""
    simple = style_applier_simple_name(info)
    return f"{info.namespace}.{simple}" if info.namespace else simple


__all__ = [
    "BuildResult",
    "STYLE_APPLIER_NAME_FORMAT",
    "StyleableInfoBuilder",
    "style_applier_name",
    "style_applier_simple_name",
]
