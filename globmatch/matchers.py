"""Primitive matchers that test and search text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from . import runes

Index = tuple[int, list[int]]

# the code point a decoder reports for an empty string
_EMPTY_RUNE = "\ufffd"


def _chars(value: Iterable[str] | None) -> str:
    return "".join(value or ())


def _no_match() -> Index:
    return -1, []


def _label(kind: str, negated: bool, body: str) -> str:
    """Render a matcher description that may carry a negation mark."""
    mark = "!" if negated else ""
    return f"<{kind}:{mark}[{body}]>"


def _offsets(start: int, count: int) -> list[int]:
    """Return the offsets ``start`` through ``start + count`` inclusive."""
    return list(range(start, start + count + 1))


class Matcher(ABC):
    """Something that decides whether a whole string matches."""

    @abstractmethod
    def match(self, s: str) -> bool:
        """Tell whether ``s`` matches as a whole."""

    def min_len(self) -> int:
        """Return the least number of characters a match needs."""
        return 0

    def children(self) -> tuple[Matcher, ...]:
        """Return the matchers this one is built from."""
        return ()


def is_indexer(matcher: object) -> bool:
    """Tell whether ``matcher`` can search for its first occurrence."""
    return callable(getattr(matcher, "index", None))


def is_sized(matcher: object) -> bool:
    """Tell whether ``matcher`` always matches a fixed number of characters."""
    return callable(getattr(matcher, "size", None))


class _NormalizedChars:
    """Turns the character-set fields of a frozen dataclass into strings."""

    _char_fields = ("separators",)

    def __post_init__(self) -> None:
        for name in self._char_fields:
            object.__setattr__(self, name, _chars(getattr(self, name)))


class _OneChar(Matcher):
    """A matcher for exactly one character chosen by ``_accepts``."""

    @abstractmethod
    def _accepts(self, ch: str) -> bool:
        """Tell whether the single character ``ch`` is acceptable."""

    def match(self, s: str) -> bool:
        if len(s) > 1:
            return False
        return self._accepts(s or _EMPTY_RUNE)

    def min_len(self) -> int:
        return 1


def _first_accepted(matcher: _OneChar, s: str) -> Index:
    """Find the first character of ``s`` that ``matcher`` accepts."""
    for i, c in enumerate(s):
        if matcher._accepts(c):
            return i, [1]
    return _no_match()


@dataclass(frozen=True)
class AnyMatcher(_NormalizedChars, Matcher):
    """Any run of characters that holds none of the separators."""

    separators: str = ""

    def match(self, s: str) -> bool:
        return runes.index_any_rune(s, self.separators) == -1

    def index(self, s: str) -> Index:
        i = runes.index_any_rune(s, self.separators)
        if i == 0:
            return 0, [0]
        if i > 0:
            s = s[:i]
        return 0, _offsets(0, len(s))

    def __str__(self) -> str:
        return f"<any:![{self.separators}]>"


@dataclass(frozen=True)
class ContainsMatcher(Matcher):
    """Strings that contain (or, negated, lack) a needle."""

    needle: str
    negated: bool = False

    def match(self, s: str) -> bool:
        return (self.needle in s) != self.negated

    def index(self, s: str) -> Index:
        offset = 0
        idx = s.find(self.needle)
        if not self.negated:
            if idx == -1:
                return _no_match()
            offset = idx + len(self.needle)
            if len(s) <= offset:
                return 0, [offset]
            s = s[offset:]
        elif idx != -1:
            s = s[:idx]
        return 0, _offsets(offset, len(s))

    def __str__(self) -> str:
        return _label("contains", self.negated, self.needle)


@dataclass(frozen=True)
class ListMatcher(_NormalizedChars, _OneChar):
    """One character from (or, negated, not from) a set."""

    _char_fields = ("chars",)

    chars: str
    negated: bool = False

    def _accepts(self, ch: str) -> bool:
        return (ch in self.chars) != self.negated

    def index(self, s: str) -> Index:
        return _first_accepted(self, s)

    def size(self) -> int:
        return 1

    def __str__(self) -> str:
        return _label("list", self.negated, self.chars)


@dataclass(frozen=True)
class MaxMatcher(Matcher):
    """Strings of at most ``limit`` characters."""

    limit: int

    def match(self, s: str) -> bool:
        return len(s) <= self.limit

    def index(self, s: str) -> Index:
        return 0, _offsets(0, min(len(s), self.limit))

    def __str__(self) -> str:
        return f"<max:{self.limit}>"


@dataclass(frozen=True)
class MinMatcher(Matcher):
    """Non-empty strings of at least ``limit`` characters."""

    limit: int

    def match(self, s: str) -> bool:
        return len(s) >= max(self.limit, 1)

    def index(self, s: str) -> Index:
        if len(s) - self.limit + 1 <= 0:
            return _no_match()
        segments = list(range(max(self.limit, 1), len(s) + 1))
        if not segments:
            return _no_match()
        return 0, segments

    def min_len(self) -> int:
        return self.limit

    def __str__(self) -> str:
        return f"<min:{self.limit}>"


@dataclass(frozen=True)
class NothingMatcher(Matcher):
    """Only the empty string."""

    def match(self, s: str) -> bool:
        return s == ""

    def index(self, s: str) -> Index:
        return 0, [0]

    def size(self) -> int:
        return 0

    def __str__(self) -> str:
        return "<nothing>"


@dataclass(frozen=True)
class PrefixAnyMatcher(_NormalizedChars, Matcher):
    """A prefix followed by any run free of separators."""

    prefix: str
    separators: str = ""

    def index(self, s: str) -> Index:
        idx = s.find(self.prefix)
        if idx == -1:
            return _no_match()
        n = len(self.prefix)
        sub = s[idx + n :]
        i = runes.index_any_rune(sub, self.separators)
        if i > -1:
            sub = sub[:i]
        return idx, _offsets(n, len(sub))

    def min_len(self) -> int:
        return len(self.prefix)

    def match(self, s: str) -> bool:
        if not s.startswith(self.prefix):
            return False
        return runes.index_any_rune(s[len(self.prefix) :], self.separators) == -1

    def __str__(self) -> str:
        return f"<prefix_any:{self.prefix}![{self.separators}]>"


@dataclass(frozen=True)
class PrefixMatcher(Matcher):
    """Strings that start with a prefix."""

    prefix: str

    def index(self, s: str) -> Index:
        idx = s.find(self.prefix)
        if idx == -1:
            return _no_match()
        n = len(self.prefix)
        return idx, _offsets(n, len(s) - idx - n)

    def min_len(self) -> int:
        return len(self.prefix)

    def match(self, s: str) -> bool:
        return s.startswith(self.prefix)

    def __str__(self) -> str:
        return f"<prefix:{self.prefix}>"


@dataclass(frozen=True)
class PrefixSuffixMatcher(Matcher):
    """Strings that start with a prefix and end with a suffix."""

    prefix: str
    suffix: str

    def index(self, s: str) -> Index:
        prefix_idx = s.find(self.prefix)
        if prefix_idx == -1:
            return _no_match()
        if not self.suffix:
            return prefix_idx, [len(s) - prefix_idx]
        segments: list[int] = []
        sub = s[prefix_idx:]
        while (suffix_idx := sub.rfind(self.suffix)) != -1:
            segments.append(suffix_idx + len(self.suffix))
            sub = sub[:suffix_idx]
        if not segments:
            return _no_match()
        segments.reverse()
        return prefix_idx, segments

    def match(self, s: str) -> bool:
        return s.startswith(self.prefix) and s.endswith(self.suffix)

    def min_len(self) -> int:
        return len(self.prefix) + len(self.suffix)

    def __str__(self) -> str:
        return f"<prefix_suffix:[{self.prefix},{self.suffix}]>"


@dataclass(frozen=True)
class RangeMatcher(_OneChar):
    """One character inside (or, negated, outside) ``lo``..``hi``."""

    lo: str
    hi: str
    negated: bool = False

    def _accepts(self, ch: str) -> bool:
        return (self.lo <= ch <= self.hi) != self.negated

    def index(self, s: str) -> Index:
        return _first_accepted(self, s)

    def size(self) -> int:
        return 1

    def __str__(self) -> str:
        return _label("range", self.negated, f"{self.lo},{self.hi}")


@dataclass(frozen=True)
class SingleMatcher(_NormalizedChars, _OneChar):
    """One character that is not a separator."""

    separators: str = ""

    def _accepts(self, ch: str) -> bool:
        return ch not in self.separators

    def index(self, s: str) -> Index:
        return _first_accepted(self, s)

    def size(self) -> int:
        return 1

    def __str__(self) -> str:
        if not self.separators:
            return "<single>"
        return f"<single:![{self.separators}]>"


@dataclass(frozen=True)
class SuffixAnyMatcher(_NormalizedChars, Matcher):
    """Any run free of separators followed by a suffix."""

    suffix: str
    separators: str = ""

    def index(self, s: str) -> Index:
        idx = s.find(self.suffix)
        if idx == -1:
            return _no_match()
        i = runes.last_index_any_rune(s[:idx], self.separators) + 1
        return i, [idx + len(self.suffix) - i]

    def min_len(self) -> int:
        return len(self.suffix)

    def match(self, s: str) -> bool:
        if not s.endswith(self.suffix):
            return False
        rest = s[: len(s) - len(self.suffix)]
        return runes.index_any_rune(rest, self.separators) == -1

    def __str__(self) -> str:
        return f"<suffix_any:![{self.separators}]{self.suffix}>"


@dataclass(frozen=True)
class SuffixMatcher(Matcher):
    """Strings that end with a suffix."""

    suffix: str

    def min_len(self) -> int:
        return len(self.suffix)

    def match(self, s: str) -> bool:
        return s.endswith(self.suffix)

    def index(self, s: str) -> Index:
        i = s.find(self.suffix)
        if i == -1:
            return _no_match()
        return 0, [i + len(self.suffix)]

    def __str__(self) -> str:
        return f"<suffix:{self.suffix}>"


@dataclass(frozen=True)
class SuperMatcher(Matcher):
    """Any string at all."""

    def match(self, s: str) -> bool:
        return True

    def index(self, s: str) -> Index:
        return 0, _offsets(0, len(s))

    def __str__(self) -> str:
        return "<super>"


@dataclass(frozen=True)
class TextMatcher(Matcher):
    """Exactly the given text."""

    text: str

    def match(self, s: str) -> bool:
        return s == self.text

    def index(self, s: str) -> Index:
        i = s.find(self.text)
        if i == -1:
            return _no_match()
        return i, [len(self.text)]

    def min_len(self) -> int:
        return len(self.text)

    def size(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return f"<text:`{self.text}`>"