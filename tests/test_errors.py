"""Tests for the diagnostic sink."""

from __future__ import annotations

import logging

from stylemeta.errors import DiagnosticSink, MalformedDeclarationError, ResolutionError
from stylemeta.models import TypeRef


def test_sink_accumulates_without_raising(caplog) -> None:
    sink = DiagnosticSink()
    foo = TypeRef("com.example.Foo")

    with caplog.at_level(logging.ERROR, logger="stylemeta"):
        sink.report(MalformedDeclarationError(foo, "bad declaration", element="value"))
        sink.report(ResolutionError(TypeRef("Bar"), "unknown style"))
        sink.report_error(TypeRef("Baz"), "custom problem")

    assert sink.has_errors
    assert len(sink) == 3
    assert [diag.kind for diag in sink] == ["malformed_declaration", "resolution", "error"]
    assert sink.diagnostics[0].format() == "com.example.Foo (value): bad declaration"
    assert "com.example.Foo (value): bad declaration" in caplog.text


def test_sink_clear_resets_state() -> None:
    sink = DiagnosticSink()
    sink.report_error(TypeRef("Foo"), "problem")

    sink.clear()

    assert not sink.has_errors
    assert sink.diagnostics == []


def test_processor_error_string_includes_location() -> None:
    error = ResolutionError(TypeRef("Foo"), "unknown style", element="styles[0]")

    assert str(error) == "Foo (styles[0]): unknown style"
