"""Lox scanner: source text to tokens."""

from __future__ import annotations

from loxscan.scanner import tokenize
from loxscan.tokens import Token

__version__ = "0.1.0"

__all__ = ["__version__", "scan", "tokenize"]


def scan(source: str, filename: str = "<input>") -> list[Token]:
    """Scan source strictly, raising LexError with every diagnostic on failure."""
    from loxscan.errors import ErrorReporter

    reporter = ErrorReporter()
    tokens = tokenize(source, reporter)
    reporter.raise_for_errors(source, filename)
    return tokens
