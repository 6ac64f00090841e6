"""Configuration loading for stylemeta (.stylemeta.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".stylemeta.yml"
DEFAULT_DECLARATIONS = "styleables.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class StyleMetaConfig:
    """Represents the settings defined in .stylemeta.yml."""

    root: Path
    declarations: Path
    symbol_table: Optional[Path] = None
    output: Optional[Path] = None


def load_config(config_path: Path) -> StyleMetaConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return StyleMetaConfig(root=root, declarations=root / DEFAULT_DECLARATIONS)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    declarations = _as_str(data.get("declarations")) or DEFAULT_DECLARATIONS

    resources_data = _as_dict(data.get("resources"))
    symbol_table = _as_str(resources_data.get("symbol_table")) if resources_data else None

    output_data = data.get("output")
    if isinstance(output_data, dict):
        output = _as_str(output_data.get("path"))
    else:
        output = _as_str(output_data)

    return StyleMetaConfig(
        root=root,
        declarations=root / declarations,
        symbol_table=root / symbol_table if symbol_table else None,
        output=root / output if output else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and str(value).strip() else None


__all__ = ["CONFIG_FILENAME", "ConfigError", "StyleMetaConfig", "load_config"]
