"""Helpers for searching and slicing text by code point."""

from __future__ import annotations

from collections.abc import Sequence


def head(s: str, n: int) -> str:
    """Return the first ``n`` characters of ``s``; all of ``s`` when ``n`` is not positive."""
    return s[:n] if n > 0 else s


def tail(s: str, n: int) -> str:
    """Return the last ``n`` characters of ``s``; all of ``s`` when ``n`` is not positive."""
    return s[-n:] if n > 0 else s


def exactly_count(s: str, n: int) -> bool:
    """Tell whether ``s`` holds exactly ``n`` characters."""
    return len(s) == n


def index_any_rune(s: str, runes: Sequence[str]) -> int:
    """Return the position in ``s`` of the first of ``runes`` (tried in order) that occurs, or -1."""
    for r in runes:
        i = s.find(r)
        if i != -1:
            return i
    return -1


def last_index_any_rune(s: str, runes: Sequence[str]) -> int:
    """Return the last position in ``s`` of the first of ``runes`` (tried in order) that occurs, or -1."""
    for r in runes:
        i = s.rfind(r)
        if i != -1:
            return i
    return -1


def index(s: str, needle: str) -> int:
    """Return the position of the first occurrence of ``needle`` in ``s``, or -1."""
    return s.find(needle)


def last_index(s: str, needle: str) -> int:
    """Return the position of the last occurrence of ``needle`` in ``s``, or -1."""
    return s.rfind(needle)


def index_any(s: Sequence[str], chars: Sequence[str]) -> int:
    """Return the position of the first character of ``s`` that is one of ``chars``, or -1."""
    if not chars:
        return -1
    wanted = set(chars)
    return next((i for i, c in enumerate(s) if c in wanted), -1)


def index_rune(s: Sequence[str], r: str) -> int:
    """Return the position of the first ``r`` in ``s``, or -1."""
    return next((i for i, c in enumerate(s) if c == r), -1)


def last_index_rune(s: Sequence[str], r: str) -> int:
    """Return the position of the last ``r`` in ``s``, or -1."""
    return next((i for i in reversed(range(len(s))) if s[i] == r), -1)


def equal(a: Sequence[str], b: Sequence[str]) -> bool:
    """Tell whether two character sequences hold the same characters in the same order."""
    return tuple(a) == tuple(b)