"""End-to-end round tests for StyleProcessor."""

from __future__ import annotations

import json

from stylemeta.errors import DiagnosticSink
from stylemeta.export import dump_infos, export_infos
from stylemeta.models import TypeRef
from stylemeta.processor import StyleProcessor
from stylemeta.resources import SymbolTableResolver
from tests._fixtures.manifest_builder import ManifestBuilder

_MANIFEST = """
types:
  - name: com.example.Foo
  - name: com.example.Bar
    styleable: bar_style
  - name: com.example.Baz
    styleable:
      dependencies: [com.example.Qux]
  - name: com.example.Quux
    styleable:
      styles:
        - name: Primary
          id: style/Primary
        - name: Secondary
          id: style/Secondary
  - name: com.example.TitleView
    styleable: TitleView
    attrs:
      - name: setTitleSize
        type: int
        format: dimension
"""

_R_TXT = """
int style Primary 0x7f010001
int style Secondary 0x7f010002
"""


def _processor(manifest_builder: ManifestBuilder, sink: DiagnosticSink | None = None) -> StyleProcessor:
    manifest_builder.manifest(_MANIFEST)
    table = manifest_builder.symbol_table(_R_TXT)
    return StyleProcessor(
        manifest_builder.scanner(),
        SymbolTableResolver.from_path(table),
        sink=sink,
    )


def test_round_builds_valid_types_and_reports_invalid(manifest_builder: ManifestBuilder) -> None:
    outcome = _processor(manifest_builder).process_round()

    assert outcome.failed
    assert [info.simple_name for info in outcome.infos] == ["Baz", "Quux", "TitleView"]
    assert [diag.type_ref.simple_name for diag in outcome.diagnostics] == ["Foo", "Bar"]

    baz = outcome.info_for(TypeRef("com.example.Baz"))
    assert baz is not None
    assert baz.dependencies == (TypeRef("com.example.Qux"),)

    quux = outcome.info_for(TypeRef("com.example.Quux"))
    assert quux is not None
    assert [(style.name, style.resource_handle) for style in quux.styles] == [
        ("Primary", 0x7F010001),
        ("Secondary", 0x7F010002),
    ]
    assert outcome.info_for(TypeRef("com.example.Foo")) is None


def test_round_reports_into_supplied_empty_sink(manifest_builder: ManifestBuilder) -> None:
    sink = DiagnosticSink()
    processor = _processor(manifest_builder, sink)

    outcome = processor.process_round()

    assert processor.sink is sink
    assert [diag.type_ref.simple_name for diag in sink] == ["Foo", "Bar"]
    assert outcome.diagnostics == sink.diagnostics


def test_round_only_returns_its_own_diagnostics(manifest_builder: ManifestBuilder) -> None:
    sink = DiagnosticSink()
    processor = _processor(manifest_builder, sink)

    processor.process_round()
    second = processor.process_round()

    assert len(second.diagnostics) == 2
    assert len(sink) == 4


def test_export_writes_versioned_json(manifest_builder: ManifestBuilder) -> None:
    outcome = _processor(manifest_builder).process_round()
    path = manifest_builder.path() / "build" / "styleables.json"

    export_infos(outcome.infos, path)

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["version"] == 1
    entries = {entry["type"]: entry for entry in payload["styleables"]}
    assert entries["com.example.Quux"]["style_applier"] == "com.example.QuuxStyleApplier"
    assert entries["com.example.Quux"]["styles"][0] == {
        "name": "Primary",
        "resource_handle": "0x7f010001",
    }
    assert entries["com.example.Baz"]["dependencies"] == ["com.example.Qux"]
    assert entries["com.example.TitleView"]["attrs"][0]["index_name"] == "TitleView_setTitleSize"
    assert json.loads(dump_infos(outcome.infos)) == payload
