"""Per-type processing errors and the diagnostic sink that collects them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .logging import get_logger
from .models import TypeRef


class ProcessorError(Exception):
    """Raised when a single annotated type cannot be turned into metadata."""

    kind = "error"

    def __init__(self, type_ref: TypeRef, message: str, *, element: Optional[str] = None) -> None:
        super().__init__(message)
        self.type_ref = type_ref
        self.message = message
        self.element = element

    def __str__(self) -> str:
        location = f"{self.type_ref}"
        if self.element:
            location += f" ({self.element})"
        return f"{location}: {self.message}"


class MalformedDeclarationError(ProcessorError):
    """The annotation's combination of value, dependencies and styles is invalid."""

    kind = "malformed_declaration"


class ResolutionError(ProcessorError):
    """A symbolic resource id could not be mapped to a resource handle."""

    kind = "resolution"


@dataclass(frozen=True)
class Diagnostic:
    """One reported problem, attached to the offending type."""

    type_ref: TypeRef
    message: str
    element: Optional[str] = None
    kind: str = ProcessorError.kind

    def format(self) -> str:
        location = str(self.type_ref)
        if self.element:
            location += f" ({self.element})"
        return f"{location}: {self.message}"


class DiagnosticSink:
    """Accumulates diagnostics for a whole round without interrupting it."""

    def __init__(self) -> None:
        self._diagnostics: List[Diagnostic] = []
        self.logger = get_logger("diagnostics")

    def report(self, error: ProcessorError) -> Diagnostic:
        return self._append(
            Diagnostic(
                type_ref=error.type_ref,
                message=error.message,
                element=error.element,
                kind=error.kind,
            )
        )

    def report_error(
        self, type_ref: TypeRef, message: str, *, element: Optional[str] = None
    ) -> Diagnostic:
        return self._append(Diagnostic(type_ref=type_ref, message=message, element=element))

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    @property
    def has_errors(self) -> bool:
        return bool(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._diagnostics))

    def _append(self, diagnostic: Diagnostic) -> Diagnostic:
        self._diagnostics.append(diagnostic)
        self.logger.error("%s", diagnostic.format())
        return diagnostic


__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "MalformedDeclarationError",
    "ProcessorError",
    "ResolutionError",
]
