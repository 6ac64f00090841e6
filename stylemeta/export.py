"""JSON export of the canonical model for the downstream generator."""

from __future__ import annotations

from dataclasses import asdict
import json
from pathlib import Path
from typing import Dict, Iterable

from .builder import style_applier_name
from .models import StyleableInfo

_EXPORT_VERSION = 1


def info_to_dict(info: StyleableInfo) -> Dict[str, object]:
    return {
        "type": info.type_handle.qualified_name,
        "namespace": info.namespace,
        "simple_name": info.simple_name,
        "style_applier": style_applier_name(info),
        "styleable_resource_name": info.styleable_resource_name,
        "styleable_fields": [asdict(item) for item in info.styleable_fields],
        "attrs": [asdict(item) for item in info.attrs],
        "dependencies": [dep.qualified_name for dep in info.dependencies],
        "styles": [
            {"name": style.name, "resource_handle": f"0x{style.resource_handle:08x}"}
            for style in info.styles
        ],
    }


def dump_infos(infos: Iterable[StyleableInfo]) -> str:
    payload = {
        "version": _EXPORT_VERSION,
        "styleables": [info_to_dict(info) for info in infos],
    }
    return json.dumps(payload, indent=2)


def export_infos(infos: Iterable[StyleableInfo], path: Path) -> Path:
    """Write the model to ``path`` and return it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_infos(infos) + "\n", encoding="utf-8")
    return path


__all__ = ["dump_infos", "export_infos", "info_to_dict"]
