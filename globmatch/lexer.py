"""Tokenizer for glob patterns."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class GlobError(ValueError):
    """Raised when a glob pattern cannot be lexed, parsed or compiled."""


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    EOF = "eof"
    ERROR = "error"
    TEXT = "text"
    CHAR = "char"
    ANY = "any"
    SUPER = "super"
    SINGLE = "single"
    NOT = "not"
    SEPARATOR = "separator"
    RANGE_OPEN = "range_open"
    RANGE_CLOSE = "range_close"
    RANGE_LO = "range_lo"
    RANGE_HI = "range_hi"
    RANGE_BETWEEN = "range_between"
    TERMS_OPEN = "terms_open"
    TERMS_CLOSE = "terms_close"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A lexed token and the raw text it came from."""

    kind: TokenType
    raw: str = ""

    def __str__(self) -> str:
        return f"{self.kind}<{self.raw!r}>"


CHAR_ANY = "*"
CHAR_COMMA = ","
CHAR_SINGLE = "?"
CHAR_ESCAPE = "\\"
CHAR_RANGE_OPEN = "["
CHAR_RANGE_CLOSE = "]"
CHAR_TERMS_OPEN = "{"
CHAR_TERMS_CLOSE = "}"
CHAR_RANGE_NOT = "!"
CHAR_RANGE_BETWEEN = "-"

SPECIALS = frozenset(
    CHAR_ANY
    + CHAR_SINGLE
    + CHAR_ESCAPE
    + CHAR_RANGE_OPEN
    + CHAR_RANGE_CLOSE
    + CHAR_TERMS_OPEN
    + CHAR_TERMS_CLOSE
)

_TEXT_BREAKERS = CHAR_SINGLE + CHAR_ANY + CHAR_RANGE_OPEN + CHAR_TERMS_OPEN
_TERMS_BREAKERS = _TEXT_BREAKERS + CHAR_TERMS_CLOSE + CHAR_COMMA


def is_special(c: str) -> bool:
    """Tell whether ``c`` is a single glob meta character."""
    return len(c) == 1 and c in SPECIALS


class Lexer:
    """Splits a glob pattern into tokens.

    Once an error is met, every further token is an ERROR token carrying
    its message; after the input is used up, every token is EOF.
    """

    def __init__(self, source: str) -> None:
        self._src = source
        self._pos = 0
        self._error: str | None = None
        self._pending: deque[Token] = deque()
        self._terms_level = 0
        self._last_width = 0

    def next_token(self) -> Token:
        """Return the next token."""
        while True:
            if self._error is not None:
                return Token(TokenType.ERROR, self._error)
            if self._pending:
                return self._pending.popleft()
            self._fetch_item()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the EOF or first ERROR token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind in (TokenType.EOF, TokenType.ERROR):
                return

    def _peek(self) -> str | None:
        if self._pos < len(self._src):
            return self._src[self._pos]
        return None

    def _read(self) -> str | None:
        ch = self._peek()
        self._last_width = 0 if ch is None else 1
        self._pos += self._last_width
        return ch

    def _unread(self) -> None:
        self._pos -= self._last_width
        self._last_width = 0

    def _emit(self, kind: TokenType, raw: str = "") -> None:
        self._pending.append(Token(kind, raw))

    @property
    def _in_terms(self) -> bool:
        return self._terms_level > 0

    def _fetch_item(self) -> None:
        ch = self._read()
        if ch is None:
            self._emit(TokenType.EOF)
        elif ch == CHAR_TERMS_OPEN:
            self._terms_level += 1
            self._emit(TokenType.TERMS_OPEN, ch)
        elif ch == CHAR_COMMA and self._in_terms:
            self._emit(TokenType.SEPARATOR, ch)
        elif ch == CHAR_TERMS_CLOSE and self._in_terms:
            self._emit(TokenType.TERMS_CLOSE, ch)
            self._terms_level -= 1
        elif ch == CHAR_RANGE_OPEN:
            self._emit(TokenType.RANGE_OPEN, ch)
            self._fetch_range()
        elif ch == CHAR_SINGLE:
            self._emit(TokenType.SINGLE, ch)
        elif ch == CHAR_ANY:
            if self._read() == CHAR_ANY:
                self._emit(TokenType.SUPER, CHAR_ANY * 2)
            else:
                self._unread()
                self._emit(TokenType.ANY, ch)
        else:
            self._unread()
            self._fetch_text(_TERMS_BREAKERS if self._in_terms else _TEXT_BREAKERS)

    def _fetch_range(self) -> None:
        want_hi = want_close = seen_not = False
        while True:
            ch = self._read()
            if ch is None:
                self._error = "unexpected end of input"
                return
            if want_close:
                if ch != CHAR_RANGE_CLOSE:
                    self._error = "expected close range character"
                else:
                    self._emit(TokenType.RANGE_CLOSE, ch)
                return
            if want_hi:
                self._emit(TokenType.RANGE_HI, ch)
                want_close = True
                continue
            if not seen_not and ch == CHAR_RANGE_NOT:
                self._emit(TokenType.NOT, ch)
                seen_not = True
                continue
            if self._peek() == CHAR_RANGE_BETWEEN:
                self._pos += 1
                self._emit(TokenType.RANGE_LO, ch)
                self._emit(TokenType.RANGE_BETWEEN, CHAR_RANGE_BETWEEN)
                want_hi = True
                continue
            self._unread()
            self._fetch_text(CHAR_RANGE_CLOSE)
            want_close = True

    def _fetch_text(self, breakers: str) -> None:
        data: list[str] = []
        escaped = False
        while (ch := self._read()) is not None:
            if not escaped:
                if ch == CHAR_ESCAPE:
                    escaped = True
                    continue
                if ch in breakers:
                    self._unread()
                    break
            escaped = False
            data.append(ch)
        if data:
            self._emit(TokenType.TEXT, "".join(data))