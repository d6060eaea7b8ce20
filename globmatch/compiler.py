"""Turns syntax trees into matchers and simplifies runs of matchers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .ast import Node, NodeType
from .composite import (
    AnyOfMatcher,
    EveryOfMatcher,
    RowMatcher,
    TreeMatcher,
    new_any_of,
    new_every_of,
    new_row,
    new_tree,
)
from .lexer import GlobError
from .matchers import (
    AnyMatcher,
    ContainsMatcher,
    ListMatcher,
    Matcher,
    MaxMatcher,
    MinMatcher,
    NothingMatcher,
    PrefixAnyMatcher,
    PrefixMatcher,
    PrefixSuffixMatcher,
    RangeMatcher,
    SingleMatcher,
    SuffixAnyMatcher,
    SuffixMatcher,
    SuperMatcher,
    TextMatcher,
    is_indexer,
    is_sized,
)
from .minimize import minimize

_CONTAINERS = (AnyOfMatcher, EveryOfMatcher, RowMatcher, TreeMatcher)
_NOTHING = NothingMatcher()


def _is_container(matcher: Matcher | None) -> bool:
    return isinstance(matcher, _CONTAINERS)


def build_matcher(matchers: Sequence[Matcher]) -> Matcher:
    """Combine a run of matchers into one, splitting around the best searchable part.

    Raises GlobError when the run is empty or nothing in it can search.
    """
    ms = list(matchers)
    if not ms:
        raise GlobError("compile error: need at least one matcher")
    if len(ms) == 1:
        return ms[0]
    glued = glue_matchers(ms)
    if glued is not None:
        return glued

    position = -1
    best_len = -2
    want_text = False
    for i, matcher in enumerate(ms):
        if not is_indexer(matcher):
            continue
        is_text = isinstance(matcher, TextMatcher)
        if want_text and not is_text:
            continue
        n = matcher.min_len()
        if (not want_text and is_text) or n > best_len:
            best_len = n
            position = i
            want_text = is_text
    if position == -1:
        raise GlobError("can not index on matchers")

    left_part = ms[:position]
    right_part = ms[position + 1 :]
    left = build_matcher(left_part) if left_part else NothingMatcher()
    right = build_matcher(right_part) if right_part else NothingMatcher()
    return new_tree(ms[position], left, right)


def optimize(matcher: Matcher) -> Matcher:
    """Replace a matcher with a cheaper equivalent where one is known."""
    if isinstance(matcher, AnyMatcher):
        return matcher if matcher.separators else SuperMatcher()
    if isinstance(matcher, ListMatcher):
        if not matcher.negated and len(matcher.chars) == 1:
            return TextMatcher(matcher.chars)
        return matcher
    if type(matcher) is TreeMatcher:
        return _optimize_tree(matcher)
    if _is_container(matcher):
        children = matcher.children()
        if len(children) == 1:
            return children[0]
    return matcher


def _optimize_tree(tree: TreeMatcher) -> Matcher:
    left = optimize(tree.left) if tree.left is not None else None
    right = optimize(tree.right) if tree.right is not None else None
    if not isinstance(tree.value, TextMatcher):
        return tree
    text = tree.value.text
    left_nil = left is None or left == _NOTHING
    right_nil = right is None or right == _NOTHING
    if left_nil and right_nil:
        return TextMatcher(text)

    left_super = isinstance(left, SuperMatcher)
    right_super = isinstance(right, SuperMatcher)
    if left_super and right_super:
        return ContainsMatcher(text)
    if left_super and right_nil:
        return SuffixMatcher(text)
    if right_super and left_nil:
        return PrefixMatcher(text)
    if left_nil and isinstance(right, SuffixMatcher):
        return PrefixSuffixMatcher(text, right.suffix)
    if right_nil and isinstance(left, PrefixMatcher):
        return PrefixSuffixMatcher(left.prefix, text)
    if right_nil and isinstance(left, AnyMatcher):
        return SuffixAnyMatcher(text, left.separators)
    if left_nil and isinstance(right, AnyMatcher):
        return PrefixAnyMatcher(text, right.separators)
    return tree


def glue_matchers(matchers: Sequence[Matcher]) -> Matcher | None:
    """Merge a run of matchers into one matcher, or return None when they do not merge."""
    glued = _glue_as_every(matchers)
    if glued is not None:
        return glued
    return _glue_as_row(matchers)


def _glue_as_row(matchers: Sequence[Matcher]) -> Matcher | None:
    if len(matchers) <= 1:
        return None
    if not all(is_indexer(m) and is_sized(m) for m in matchers):
        return None
    return new_row(matchers)


def _glue_as_every(matchers: Sequence[Matcher]) -> Matcher | None:
    if len(matchers) <= 1:
        return None
    has_any = has_super = has_single = False
    minimum = 0
    separator: str | None = None
    for matcher in matchers:
        if isinstance(matcher, SuperMatcher):
            sep = ""
            has_super = True
        elif isinstance(matcher, AnyMatcher):
            sep = matcher.separators
            has_any = True
        elif isinstance(matcher, SingleMatcher):
            sep = matcher.separators
            has_single = True
            minimum += 1
        elif isinstance(matcher, ListMatcher):
            if not matcher.negated:
                return None
            sep = matcher.chars
            has_single = True
            minimum += 1
        else:
            return None
        if separator is None:
            separator = sep
        elif sep != separator:
            return None

    separator = separator or ""
    if has_super and not has_any and not has_single:
        return SuperMatcher()
    if has_any and not has_super and not has_single:
        return AnyMatcher(separator)
    if (has_any or has_super) and minimum > 0 and not separator:
        return MinMatcher(minimum)

    every: list[Matcher] = []
    if minimum > 0:
        every.append(MinMatcher(minimum))
        if not has_any and not has_super:
            every.append(MaxMatcher(minimum))
    if separator:
        every.append(AnyMatcher(separator))
    return new_every_of(every)


def _count_nested(matcher: Matcher) -> int:
    if not _is_container(matcher):
        return 0
    return sum(1 + _count_nested(child) for child in matcher.children())


def _nesting_depth(matcher: Matcher) -> int:
    if not _is_container(matcher):
        return 0
    return 1 + max((_nesting_depth(c) for c in matcher.children()), default=0)


@dataclass(frozen=True)
class _Result:
    matchers: list[Matcher]

    @property
    def key(self) -> tuple[int, int, int, int, int]:
        ms = self.matchers
        lengths = [m.min_len() for m in ms]
        count = len(ms) + sum(_count_nested(m) for m in ms)
        nesting = max((_nesting_depth(m) for m in ms), default=0)
        return (-sum(lengths), len(ms), nesting, count, -max(lengths, default=0))


def _search(ms: list[Matcher], best: _Result | None) -> _Result | None:
    for i in range(len(ms) - 1):
        for j in range(i + 2, len(ms) + 1):
            glued = glue_matchers(ms[i:j])
            if glued is None:
                continue
            collapsed = [*ms[:i], glued, *ms[j:]]
            candidate = _Result(collapsed)
            if best is None or candidate.key < best.key:
                best = candidate
            best = _search(collapsed, best)
    return best


def minimize_matchers(matchers: Sequence[Matcher]) -> list[Matcher]:
    """Return the best run obtained by merging neighbouring matchers, or the run itself."""
    ms = list(matchers)
    best = _search(ms, None)
    return ms if best is None else best.matchers


def build_match(node: Node, separators: Sequence[str] | str | None = None) -> Matcher:
    """Compile a syntax tree into a matcher; raises GlobError on failure."""
    reduced = minimize(node)
    if reduced is not None:
        try:
            return build_match(reduced, separators)
        except GlobError:
            pass

    kind = node.kind
    if kind is NodeType.ANY_OF:
        return new_any_of(*(build_match(c, separators) for c in node.children))
    if kind is NodeType.PATTERN:
        if not node.children:
            return NothingMatcher()
        children = [build_match(c, separators) for c in node.children]
        matcher = build_matcher(minimize_matchers(children))
    elif kind is NodeType.ANY:
        matcher = AnyMatcher(separators)
    elif kind is NodeType.SUPER:
        matcher = SuperMatcher()
    elif kind is NodeType.SINGLE:
        matcher = SingleMatcher(separators)
    elif kind is NodeType.NOTHING:
        matcher = NothingMatcher()
    elif kind is NodeType.LIST:
        matcher = ListMatcher(node.value.chars, node.value.negated)
    elif kind is NodeType.RANGE:
        matcher = RangeMatcher(node.value.lo, node.value.hi, node.value.negated)
    elif kind is NodeType.TEXT:
        matcher = TextMatcher(node.value.text)
    else:
        raise GlobError(f"could not compile tree: unknown node type {kind}")
    return optimize(matcher)