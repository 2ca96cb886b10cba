"""Token dumps for the CLI and for debugging."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from loxscan.tokens import Token, TokenType


def token_to_dict(token: Token) -> dict[str, Any]:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def dump_tokens(
    tokens: list[Token],
    *,
    file: TextIO = sys.stdout,
    fmt: str = "text",
    include_eof: bool = True,
) -> None:
    """Write *tokens* to *file* as aligned text lines or a JSON array."""
    if not include_eof:
        tokens = [t for t in tokens if t.type != TokenType.EOF]

    if fmt == "json":
        json.dump([token_to_dict(t) for t in tokens], file, indent=2)
        file.write("\n")
        return

    for tok in tokens:
        file.write(f"{tok.line:>4} {tok}\n")
