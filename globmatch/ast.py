"""Syntax tree of a parsed glob pattern."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class NodeType(Enum):
    """Kinds of syntax tree node."""

    NOTHING = "Nothing"
    PATTERN = "Pattern"
    LIST = "List"
    RANGE = "Range"
    TEXT = "Text"
    ANY = "Any"
    SUPER = "Super"
    SINGLE = "Single"
    ANY_OF = "AnyOf"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ListData:
    """Payload of a character list such as ``[abc]`` or ``[!abc]``."""

    chars: str
    negated: bool = False


@dataclass(frozen=True)
class RangeData:
    """Payload of a character range such as ``[a-z]`` or ``[!a-z]``."""

    lo: str
    hi: str
    negated: bool = False


@dataclass(frozen=True)
class TextData:
    """Payload of a literal text run."""

    text: str


class Node:
    """A node of the syntax tree; equality ignores the parent link."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, kind: NodeType, value: Any = None, *args: Node) -> None:
        self.parent: Node | None = None
        self.kind = kind
        self.value = value
        self.children: list[Node] = []
        self.insert(*args)

    def insert(self, *args: Node) -> None:
        """Append children and make this node their parent."""
        for child in args:
            child.parent = self
            self.children.append(child)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.value == other.value
            and self.children == other.children
        )

    def __str__(self) -> str:
        text = str(self.kind)
        if self.value is not None:
            text += f" ={self.value}"
        if self.children:
            text += " [" + ", ".join(str(child) for child in self.children) + "]"
        return text

    def __repr__(self) -> str:
        return f"Node({self})"