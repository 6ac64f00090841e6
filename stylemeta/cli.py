"""CLI entrypoints for stylemeta commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, StyleMetaConfig, load_config
from .export import export_infos
from .logging import configure_logging
from .processor import RoundOutcome, StyleProcessor
from .resources import SymbolTableError, SymbolTableResolver
from .scanner import ManifestError, ManifestScanner


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_input_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory or .stylemeta.yml file (defaults to current directory).",
    )
    parser.add_argument(
        "--declarations",
        type=Path,
        help="Declarations manifest to scan instead of the configured one.",
    )
    parser.add_argument(
        "--symbol-table",
        type=Path,
        help="R.txt symbol table used to resolve style ids.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stylemeta",
        description="Build validated styling metadata for styleable types.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log output, including every diagnostic, to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser(
        "build",
        help="Build styleable metadata and export it for code generation.",
    )
    _add_verbose_option(build_parser, suppress_default=True)
    _add_input_options(build_parser)
    build_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the metadata model as JSON to this path.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate styleable declarations without exporting anything.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_input_options(check_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for stylemeta commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = _apply_overrides(load_config(Path(args.path)), args)
        outcome = _run_round(config)
    except (ConfigError, ManifestError, SymbolTableError) as exc:
        parser.exit(1, f"stylemeta {args.command} failed: {exc}\n")

    if args.command == "build":
        print(f"Built {len(outcome.infos)} styleable records")
        if config.output is not None:
            path = export_infos(outcome.infos, config.output)
            print(f"Metadata written to {_relativize(path)}")
    elif args.command == "check":
        print(f"Checked {len(outcome.infos) + len(outcome.diagnostics)} styleable types")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    if outcome.failed:
        parser.exit(1, f"{len(outcome.diagnostics)} styleable declaration(s) failed validation\n")


def _apply_overrides(config: StyleMetaConfig, args: argparse.Namespace) -> StyleMetaConfig:
    if getattr(args, "declarations", None) is not None:
        config.declarations = args.declarations
    if getattr(args, "symbol_table", None) is not None:
        config.symbol_table = args.symbol_table
    if getattr(args, "output", None) is not None:
        config.output = args.output
    return config


def _run_round(config: StyleMetaConfig) -> RoundOutcome:
    if not config.declarations.exists():
        raise ManifestError(f"Declarations manifest not found: {config.declarations}")
    scanner = ManifestScanner.from_path(config.declarations)
    if config.symbol_table is not None:
        resolver = SymbolTableResolver.from_path(config.symbol_table)
    else:
        resolver = SymbolTableResolver()
    return StyleProcessor(scanner, resolver).process_round()


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
