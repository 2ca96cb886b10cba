"""Command-line interface for loxscan."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from loxscan.debug import dump_tokens
from loxscan.errors import ErrorReporter, LexError
from loxscan.scanner import tokenize

FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when the config file holds an invalid value."""


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    fmt: str
    include_eof: bool
    quiet: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source into tokens",
    )
    p.add_argument("input", help="Input .lox file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Token dump format (default: text)",
    )
    p.add_argument(
        "--no-eof",
        dest="include_eof",
        action="store_false",
        default=None,
        help="Omit the EOF token from the dump",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover loxscan.toml)",
    )
    p.add_argument("-q", "--quiet", action="store_true", help="Report errors only, no token dump")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file.

    A missing auto-discovered file yields an empty dict; a missing explicit
    *config_path* raises ConfigError.
    """
    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"config file not found: {config_path}")
    path = config_path if config_path is not None else input_dir / "loxscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    if args.input == "-":
        input_file = None
        input_dir = Path(".")
    else:
        input_file = Path(args.input)
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file: {exc}") from exc

    fmt = "text"
    include_eof = True
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise ConfigError(f"invalid output.format in config: {cfg_format!r}")
            fmt = cfg_format
        cfg_eof = cfg_output.get("include_eof")
        if cfg_eof is not None:
            if not isinstance(cfg_eof, bool):
                raise ConfigError(f"invalid output.include_eof in config: {cfg_eof!r}")
            include_eof = cfg_eof

    if args.format is not None:
        fmt = args.format
    if args.include_eof is not None:
        include_eof = args.include_eof

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        fmt=fmt,
        include_eof=include_eof,
        quiet=args.quiet,
    )


def read_source(options: CliOptions, stdin: TextIO | None = None) -> tuple[str, str]:
    """Return (source, display name) for the configured input."""
    if options.input_file is None:
        return (stdin or sys.stdin).read(), "<stdin>"
    return options.input_file.read_text(encoding="utf-8"), str(options.input_file)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
        source, filename = read_source(options)
    except (ConfigError, OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    reporter = ErrorReporter()
    tokens = tokenize(source, reporter)

    if not options.quiet:
        try:
            if options.output_file:
                with open(options.output_file, "w", encoding="utf-8") as f:
                    dump_tokens(tokens, file=f, fmt=options.fmt, include_eof=options.include_eof)
            else:
                dump_tokens(tokens, file=sys.stdout, fmt=options.fmt, include_eof=options.include_eof)
        except OSError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

    try:
        reporter.raise_for_errors(source, filename)
    except LexError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    return 0
