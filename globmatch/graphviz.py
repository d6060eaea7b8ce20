"""Renders a matcher as a Graphviz digraph."""

from __future__ import annotations

import random

from .composite import AnyOfMatcher, EveryOfMatcher, RowMatcher, TreeMatcher
from .matchers import Matcher

_CONTAINERS = (AnyOfMatcher, EveryOfMatcher, RowMatcher, TreeMatcher)


def _new_id() -> str:
    return f"{random.getrandbits(63):x}"


def graphviz(pattern: str, matcher: Matcher) -> str:
    """Return a Graphviz description of ``matcher`` labelled with ``pattern``."""
    return f'digraph G {{graph[label="{pattern}"];{_render(matcher, _new_id())}}}'


def _render(matcher: Matcher, node_id: str) -> str:
    parts: list[str] = []
    if type(matcher) is TreeMatcher:
        parts.append(f'"{node_id}"[label="{matcher.value}"];')
        for side in (matcher.left, matcher.right):
            sub = _new_id()
            if side is None:
                parts.append(f'"{sub}"[label="<nil>"];')
                parts.append(f'"{node_id}"->"{sub}";')
            else:
                parts.append(f'"{node_id}"->"{sub}";')
                parts.append(_render(side, sub))
    elif isinstance(matcher, _CONTAINERS):
        parts.append(f'"{node_id}"[label="Container({type(matcher).__name__})"];')
        for child in matcher.children():
            sub = _new_id()
            parts.append(_render(child, sub))
            parts.append(f'"{node_id}"->"{sub}";')
    else:
        parts.append(f'"{node_id}"[label="{matcher}"];')
    return "".join(parts)