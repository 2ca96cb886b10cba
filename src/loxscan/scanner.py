"""Lox scanner: converts source text into a flat token list in one pass."""

from __future__ import annotations

from loxscan.errors import ErrorReporter, ErrorSink, LexErrorKind
from loxscan.tokens import KEYWORDS, Token, TokenType, is_alpha, is_alpha_numeric, is_digit

_SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# operator char -> (short form, form with trailing "=")
_ONE_OR_TWO_CHAR = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

_WHITESPACE = frozenset(" \r\t")


class Scanner:
    """Scan one Lox source text into tokens, reporting errors to a sink.

    A Scanner is single-use: ``scan_tokens`` may be called once.
    """

    def __init__(self, source: str, sink: ErrorSink) -> None:
        self._source = source
        self._sink = sink
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1
        self._scanned = False

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list, ending with EOF."""
        if self._scanned:
            raise RuntimeError("Scanner instances are single-use")
        self._scanned = True

        while not self._is_at_end():
            self._start = self._current
            self._start_line = self._line
            token = self._scan_token()
            if token is not None:
                self._tokens.append(token)

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    def _scan_token(self) -> Token | None:
        ch = self._advance()

        if ch in _SINGLE_CHAR:
            return self._make_token(_SINGLE_CHAR[ch])

        if ch in _ONE_OR_TWO_CHAR:
            short, long = _ONE_OR_TWO_CHAR[ch]
            return self._make_token(long if self._match("=") else short)

        if ch == "/":
            if self._match("/"):
                self._skip_comment()
                return None
            return self._make_token(TokenType.SLASH)

        if ch in _WHITESPACE:
            return None

        if ch == "\n":
            self._line += 1
            return None

        if ch == '"':
            return self._string()

        if is_digit(ch):
            return self._number()

        if is_alpha(ch):
            return self._identifier()

        self._error(LexErrorKind.UNEXPECTED_CHARACTER)
        return None

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _is_at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        idx = self._current + 1
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _make_token(self, tt: TokenType, literal: str | float | None = None) -> Token:
        text = self._source[self._start : self._current]
        return Token(tt, text, literal, self._start_line)

    def _error(self, kind: LexErrorKind) -> None:
        self._sink.record(self._line, kind.value)

    # ------------------------------------------------------------------
    # Sub-scanners
    # ------------------------------------------------------------------

    def _skip_comment(self) -> None:
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    def _string(self) -> Token | None:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._error(LexErrorKind.UNTERMINATED_STRING)
            return None

        # Closing quote
        self._advance()
        value = self._source[self._start + 1 : self._current - 1]
        return self._make_token(TokenType.STRING, value)

    def _number(self) -> Token:
        self._digits()
        # A trailing "." without a digit after it is left for the next token
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            self._digits()
        value = float(self._source[self._start : self._current])
        return self._make_token(TokenType.NUMBER, value)

    def _digits(self) -> None:
        while is_digit(self._peek()):
            self._advance()

    def _identifier(self) -> Token:
        while is_alpha_numeric(self._peek()):
            self._advance()
        text = self._source[self._start : self._current]
        return self._make_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def tokenize(source: str, sink: ErrorSink | None = None) -> list[Token]:
    """Convenience function: scan source and return the token list.

    Errors go to *sink*; without one they are collected and dropped.
    """
    if sink is None:
        sink = ErrorReporter()
    return Scanner(source, sink).scan_tokens()
