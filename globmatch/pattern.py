"""Compiled glob patterns."""

from __future__ import annotations

from collections.abc import Iterable

from .compiler import build_match
from .lexer import Lexer, is_special
from .matchers import Matcher
from .parser import parse


def _compile(pattern: str, separators: str) -> Matcher:
    return build_match(parse(Lexer(pattern)), separators)


class Glob:
    """A glob pattern compiled into a matcher.

    Pattern syntax::

        *          any run of non-separator characters
        **         any run of characters
        ?          any single non-separator character
        [abc]      one of the listed characters; [!abc] negates
        [a-z]      one character in the range; [!a-z] negates
        {a,b}      any of the comma-separated alternative patterns
        \\c         the character c itself

    Raises GlobError when the pattern is malformed.
    """

    def __init__(self, pattern: str = "", separators: Iterable[str] = ()) -> None:
        self.separators = "".join(separators)
        self.matcher = _compile(pattern, self.separators)
        self.pattern = pattern

    def match(self, s: str) -> bool:
        """Tell whether ``s`` matches the whole pattern."""
        return self.matcher.match(s)

    def unmarshal_text(self, data: bytes | str) -> None:
        """Replace the pattern with ``data``, compiled without separators.

        On failure GlobError is raised and the glob is left unchanged.
        """
        pattern = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
        matcher = _compile(pattern, "")
        self.matcher, self.pattern, self.separators = matcher, pattern, ""

    def marshal_text(self) -> bytes:
        """Return the pattern as UTF-8 bytes."""
        return self.pattern.encode("utf-8")

    def __str__(self) -> str:
        return self.pattern

    def __repr__(self) -> str:
        return f"Glob({self.pattern!r})"


def compile_glob(pattern: str, *args: str) -> Glob:
    """Compile ``pattern`` with the given separator characters; raises GlobError."""
    return Glob(pattern, args)


def quote(s: str) -> str:
    """Escape every glob meta character in ``s`` with a backslash."""
    return "".join("\\" + c if is_special(c) else c for c in s)