"""Round orchestration: scan, build and collect diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .builder import StyleableInfoBuilder
from .errors import Diagnostic, DiagnosticSink
from .logging import get_logger
from .models import StyleableInfo, TypeRef
from .resources import ResourceResolver
from .scanner import SymbolScanner, build_member_index


@dataclass
class RoundOutcome:
    """Records built in one round plus everything reported along the way."""

    infos: Tuple[StyleableInfo, ...]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return bool(self.diagnostics)

    def info_for(self, type_ref: TypeRef) -> Optional[StyleableInfo]:
        for info in self.infos:
            if info.type_handle == type_ref:
                return info
        return None


class StyleProcessor:
    """Runs processing rounds over the types supplied by a scanner."""

    def __init__(
        self,
        scanner: SymbolScanner,
        resolver: ResourceResolver,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.scanner = scanner
        self.builder = StyleableInfoBuilder(resolver)
        self.sink = sink if sink is not None else DiagnosticSink()
        self.logger = get_logger("processor")

    def process_round(self) -> RoundOutcome:
        declarations = list(self.scanner.scan_annotated_types())
        self.logger.info("Processing %d styleable types", len(declarations))
        reported_before = len(self.sink)

        members = build_member_index(self.scanner)
        infos = self.builder.build_all(declarations, members, self.sink)

        diagnostics = self.sink.diagnostics[reported_before:]
        self.logger.info(
            "Built %d styleable records, %d errors", len(infos), len(diagnostics)
        )
        return RoundOutcome(infos=infos, diagnostics=diagnostics)


__all__ = ["RoundOutcome", "StyleProcessor"]
