"""Builds a syntax tree from lexer tokens."""

from __future__ import annotations

from typing import Protocol

from .ast import ListData, Node, NodeType, RangeData, TextData
from .lexer import GlobError, Token, TokenType

_SIMPLE = {
    TokenType.ANY: NodeType.ANY,
    TokenType.SUPER: NodeType.SUPER,
    TokenType.SINGLE: NodeType.SINGLE,
}


class TokenSource(Protocol):
    """Anything that hands out tokens one at a time."""

    def next_token(self) -> Token: ...


def parse(lexer: TokenSource) -> Node:
    """Read tokens from ``lexer`` until EOF and return the pattern tree.

    Raises GlobError on a lexer error or a malformed pattern.
    """
    tree = Node(NodeType.PATTERN)
    node = tree
    while True:
        token = lexer.next_token()
        kind = token.kind
        if kind is TokenType.EOF:
            return tree
        if kind is TokenType.ERROR:
            raise GlobError(token.raw)
        if kind is TokenType.TEXT:
            node.insert(Node(NodeType.TEXT, TextData(token.raw)))
        elif kind in _SIMPLE:
            node.insert(Node(_SIMPLE[kind]))
        elif kind is TokenType.RANGE_OPEN:
            node.insert(_parse_range(lexer))
        elif kind is TokenType.TERMS_OPEN:
            alternatives = Node(NodeType.ANY_OF)
            node.insert(alternatives)
            node = Node(NodeType.PATTERN)
            alternatives.insert(node)
        elif kind is TokenType.SEPARATOR:
            alternatives = _ancestor(node, 1, token)
            node = Node(NodeType.PATTERN)
            alternatives.insert(node)
        elif kind is TokenType.TERMS_CLOSE:
            node = _ancestor(node, 2, token)
        else:
            raise GlobError(f"unexpected token: {token}")


def _ancestor(node: Node, levels: int, token: Token) -> Node:
    for _ in range(levels):
        if node.parent is None:
            raise GlobError(f"unexpected token: {token}")
        node = node.parent
    return node


def _parse_range(lexer: TokenSource) -> Node:
    negated = False
    lo = hi = chars = ""
    while True:
        token = lexer.next_token()
        kind = token.kind
        if kind is TokenType.EOF:
            raise GlobError("unexpected end")
        if kind is TokenType.ERROR:
            raise GlobError(token.raw)
        if kind is TokenType.NOT:
            negated = True
        elif kind is TokenType.RANGE_LO:
            if len(token.raw) > 1:
                raise GlobError("unexpected length of lo character")
            lo = token.raw
        elif kind is TokenType.RANGE_HI:
            if len(token.raw) > 1:
                raise GlobError("unexpected length of hi character")
            hi = token.raw
            if hi < lo:
                raise GlobError(
                    f"hi character '{hi}' should be greater than lo '{lo}'"
                )
        elif kind is TokenType.TEXT:
            chars = token.raw
        elif kind is TokenType.RANGE_CLOSE:
            is_range = bool(lo) and bool(hi)
            is_chars = chars != ""
            if is_chars == is_range:
                raise GlobError("could not parse range")
            if is_range:
                return Node(NodeType.RANGE, RangeData(lo, hi, negated))
            return Node(NodeType.LIST, ListData(chars, negated))