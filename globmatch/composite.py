"""Matchers built out of other matchers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cached_property

from . import runes
from .matchers import Index, Matcher, NothingMatcher, _no_match, is_indexer, is_sized


def _spaced(matchers: Iterable[Matcher]) -> str:
    return "[" + " ".join(str(m) for m in matchers) + "]"


def _size_of(matcher: Matcher | None) -> int:
    if matcher is not None and is_sized(matcher):
        return matcher.size()  # type: ignore[attr-defined]
    return 0


def _all_sized(parts: Iterable[Matcher | None]) -> bool:
    return all(p is not None and is_sized(p) for p in parts)


def append_merge(target: Sequence[int], sub: Sequence[int]) -> list[int]:
    """Merge two sorted lists of unique offsets into one sorted list without repeats."""
    merged: list[int] = []
    for value in heapq.merge(target, sub):
        if not merged or merged[-1] != value:
            merged.append(value)
    return merged


@dataclass(frozen=True)
class _Group(Matcher):
    """A matcher that holds an ordered collection of other matchers."""

    matchers: tuple[Matcher, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "matchers", tuple(self.matchers))


@dataclass(frozen=True)
class AnyOfMatcher(_Group):
    """Strings matched by at least one of several matchers."""

    def match(self, s: str) -> bool:
        return any(m.match(s) for m in self.matchers)

    def min_len(self) -> int:
        return min((m.min_len() for m in self.matchers), default=0)

    def children(self) -> tuple[Matcher, ...]:
        return self.matchers

    def __str__(self) -> str:
        return "<any_of:[" + ",".join(str(m) for m in self.matchers) + "]>"


@dataclass(frozen=True)
class IndexedAnyOfMatcher(AnyOfMatcher):
    """Alternatives that can all search, so the alternation can search too."""

    def index(self, s: str) -> Index:
        index = -1
        segments: list[int] = []
        for matcher in self.matchers:
            i, seg = matcher.index(s)  # type: ignore[attr-defined]
            if i == -1:
                continue
            if index == -1 or i < index:
                index = i
                segments = list(seg)
            elif i == index:
                segments = append_merge(segments, seg)
        if index == -1:
            return _no_match()
        return index, segments

    def __str__(self) -> str:
        return f"<indexed_any_of:[{_spaced(self.matchers)}]>"


@dataclass(frozen=True)
class IndexedSizedAnyOfMatcher(IndexedAnyOfMatcher):
    """Searchable alternatives that all match the same number of characters."""

    rune_count: int = 0

    def size(self) -> int:
        return self.rune_count


def new_any_of(*args: Matcher) -> Matcher:
    """Build the most capable alternation of the given matchers."""
    if not all(is_indexer(m) for m in args):
        return AnyOfMatcher(args)
    if args and all(is_sized(m) for m in args):
        sizes = {m.size() for m in args}  # type: ignore[attr-defined]
        if len(sizes) == 1:
            return IndexedSizedAnyOfMatcher(args, sizes.pop())
    return IndexedAnyOfMatcher(args)


@dataclass(frozen=True)
class EveryOfMatcher(_Group):
    """Strings matched by all of several matchers."""

    def match(self, s: str) -> bool:
        return all(m.match(s) for m in self.matchers)

    def min_len(self) -> int:
        return max((m.min_len() for m in self.matchers), default=0)

    def children(self) -> tuple[Matcher, ...]:
        return self.matchers

    def __str__(self) -> str:
        return f"<every_of:[{_spaced(self.matchers)}]>"


@dataclass(frozen=True)
class IndexedEveryOfMatcher(EveryOfMatcher):
    """A conjunction of matchers that can all search."""

    def index(self, s: str) -> Index:
        index = 0
        offset = 0
        current: list[int] = []
        sub = s
        for position, matcher in enumerate(self.matchers):
            idx, seg = matcher.index(sub)  # type: ignore[attr-defined]
            if idx == -1:
                return _no_match()
            if position == 0:
                current = list(seg)
            else:
                delta = index - (idx + offset)
                following = [n for ex in current for n in seg if ex + delta == n]
                if not following:
                    return _no_match()
                current = following
            index = idx + offset
            sub = s[index:]
            offset += idx
        return index, current

    def __str__(self) -> str:
        return f"<indexed_every_of:[{_spaced(self.matchers)}]>"


def new_every_of(matchers: Iterable[Matcher]) -> Matcher:
    """Build a conjunction, searchable when every part can search."""
    items = tuple(matchers)
    if all(is_indexer(m) for m in items):
        return IndexedEveryOfMatcher(items)
    return EveryOfMatcher(items)


@dataclass(frozen=True)
class RowMatcher(_Group):
    """Fixed-width matchers that must match one after another."""

    @cached_property
    def _width(self) -> int:
        return sum(_size_of(m) for m in self.matchers)

    def match(self, s: str) -> bool:
        if not runes.exactly_count(s, self._width):
            return False
        return self._match_all(s)

    def min_len(self) -> int:
        return self._width

    def size(self) -> int:
        return self._width

    def children(self) -> tuple[Matcher, ...]:
        return self.matchers

    def index(self, s: str) -> Index:
        if not self.matchers:
            return 0, [0]
        first = self.matchers[0]
        j = 0
        while j <= len(s) - self._width:
            i, _ = first.index(s[j:])  # type: ignore[attr-defined]
            if i == -1:
                return _no_match()
            start = j + i
            if self._match_all(s[start:]):
                return start, [self._width]
            j = start + 1
        return _no_match()

    def _match_all(self, s: str) -> bool:
        i = 0
        for matcher in self.matchers:
            sub = runes.head(s[i:], _size_of(matcher))
            if not matcher.match(sub):
                return False
            i += len(sub)
        return True

    def __str__(self) -> str:
        return f"<row_{self._width}:{_spaced(self.matchers)}>"


def new_row(matchers: Iterable[Matcher]) -> RowMatcher:
    """Build a row of fixed-width matchers."""
    return RowMatcher(tuple(matchers))


_NOTHING = NothingMatcher()


@dataclass(frozen=True)
class TreeMatcher(Matcher):
    """A searchable value with matchers for the text left and right of it."""

    value: Matcher
    left: Matcher | None
    right: Matcher | None

    @cached_property
    def _sizes(self) -> tuple[int, int, int]:
        return _size_of(self.left), _size_of(self.value), _size_of(self.right)

    @cached_property
    def _total(self) -> int:
        if _all_sized((self.left, self.value, self.right)):
            return sum(self._sizes)
        return 0

    def min_len(self) -> int:
        return sum(m.min_len() for m in self.children())

    def children(self) -> tuple[Matcher, ...]:
        return tuple(m for m in (self.left, self.value, self.right) if m is not None)

    def _offset_limit(self, s: str) -> tuple[int, int]:
        if self._total > len(s):
            return 0, 0
        left_size, _, right_size = self._sizes
        offset = len(runes.head(s, left_size)) if left_size > 0 else 0
        limit = len(runes.tail(s, right_size)) if right_size > 0 else 0
        return offset, limit

    def match(self, s: str) -> bool:
        left = self.left if self.left is not None else _NOTHING
        right = self.right if self.right is not None else _NOTHING
        value_size = self._sizes[1]
        n = len(s)
        offset, limit = self._offset_limit(s)
        while n - offset - limit >= value_size:
            index, segments = self.value.index(s[offset : n - limit])  # type: ignore[attr-defined]
            if index == -1:
                return False
            start = offset + index
            if left.match(s[:start]):
                if any(right.match(s[start + seg :]) for seg in segments):
                    return True
            if start >= n:
                break
            offset = start + 1
        return False

    def __str__(self) -> str:
        left = "<nil>" if self.left is None else str(self.left)
        right = "<nil>" if self.right is None else str(self.right)
        return f"<btree:[{left}<-{self.value}->{right}]>"


@dataclass(frozen=True)
class SizedTreeMatcher(TreeMatcher):
    """A tree whose parts all match a fixed number of characters."""

    def size(self) -> int:
        return self._total


def new_tree(value: Matcher, left: Matcher | None, right: Matcher | None) -> TreeMatcher:
    """Build a tree, sized when the value and both sides are sized."""
    if _all_sized((value, left, right)):
        return SizedTreeMatcher(value, left, right)
    return TreeMatcher(value, left, right)