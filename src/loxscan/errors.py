"""Lexical diagnostics: the error sink protocol, a collecting reporter, and LexError."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class LexErrorKind(Enum):
    """The recoverable lexical errors; each value is the reported message."""

    UNEXPECTED_CHARACTER = "Unexpected character."
    UNTERMINATED_STRING = "Unterminated string."


_KIND_BY_MESSAGE = {kind.value: kind for kind in LexErrorKind}


@runtime_checkable
class ErrorSink(Protocol):
    """Receives lexical errors as the scanner discovers them."""

    def record(self, line: int, message: str) -> object: ...


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One recorded lexical error."""

    line: int
    message: str

    @property
    def kind(self) -> LexErrorKind | None:
        return _KIND_BY_MESSAGE.get(self.message)


class ErrorReporter:
    """An ErrorSink that keeps every diagnostic in the order it was recorded."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def record(self, line: int, message: str) -> None:
        self._diagnostics.append(Diagnostic(line, message))

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return list(self._diagnostics)

    @property
    def had_error(self) -> bool:
        return bool(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    def raise_for_errors(self, source: str, filename: str = "<input>") -> None:
        """Raise LexError if anything was recorded."""
        if self._diagnostics:
            raise LexError(self.diagnostics, source, filename)


class LexError(Exception):
    """Raised by strict callers when a scan recorded one or more diagnostics."""

    def __init__(
        self,
        diagnostics: list[Diagnostic],
        source: str,
        filename: str = "<input>",
    ) -> None:
        self.diagnostics = diagnostics
        self.source = source
        self.filename = filename
        super().__init__(self.format())

    def format(self, filename: str | None = None) -> str:
        name = filename if filename is not None else self.filename
        lines = self.source.split("\n")
        return "\n".join(format_diagnostic(d, lines, name) for d in self.diagnostics)


def format_diagnostic(diagnostic: Diagnostic, lines: list[str], filename: str) -> str:
    """Render one diagnostic with its source line underlined."""
    line_idx = diagnostic.line - 1

    # Unterminated strings can report one line past the last newline
    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\r")
    else:
        source_line = ""

    carets = "^" * max(1, len(source_line))

    line_num = str(diagnostic.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {diagnostic.message}\n"
        f"{' ' * gutter_width}--> {filename}:{diagnostic.line}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {carets}"
    )
