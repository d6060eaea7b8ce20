"""Tree rewrites that factor common parts out of pattern alternatives."""

from __future__ import annotations

from collections.abc import Sequence

from .ast import Node, NodeType


def minimize(node: Node) -> Node | None:
    """Return a simpler equivalent of ``node``, or None when nothing can be simplified."""
    if node.kind is NodeType.ANY_OF:
        return _minimize_any_of(node)
    return None


def _minimize_any_of(node: Node) -> Node | None:
    """Factor the children shared at the start and end of every alternative."""
    if not same_kind(node.children, NodeType.PATTERN):
        return None
    common_left, common_right = common_children(node.children)
    left_count, right_count = len(common_left), len(common_right)
    if not common_left and not common_right:
        return None

    result: list[Node] = []
    if common_left:
        result.append(Node(NodeType.PATTERN, None, *common_left))

    alternatives: list[Node] = []
    for child in node.children:
        reuse = child.children[left_count : len(child.children) - right_count]
        if reuse:
            candidate = Node(NodeType.PATTERN, None, *reuse)
        else:
            # the alternative is entirely covered by the common parts
            candidate = Node(NodeType.NOTHING)
        alternatives = append_unique(alternatives, candidate)

    if len(alternatives) == 1 and alternatives[0].kind is not NodeType.NOTHING:
        result.append(alternatives[0])
    elif len(alternatives) > 1:
        result.append(Node(NodeType.ANY_OF, None, *alternatives))

    if common_right:
        result.append(Node(NodeType.PATTERN, None, *common_right))
    return Node(NodeType.PATTERN, None, *result)


def common_children(nodes: Sequence[Node]) -> tuple[list[Node], list[Node]]:
    """Return the children shared by all ``nodes`` at the start and at the end."""
    if len(nodes) <= 1:
        return [], []
    idx = one_with_least_children(nodes)
    if idx == -1:
        return [], []

    tree = nodes[idx]
    tree_len = len(tree.children)
    right: list[Node | None] = [None] * tree_len
    last_right = tree_len
    left: list[Node] = []
    break_left = break_right = False
    common_total = 0

    for i, j in zip(range(tree_len), reversed(range(tree_len))):
        if common_total >= tree_len or (break_left and break_right):
            break
        tree_left = tree.children[i]
        tree_right = tree.children[j]
        for k, other in enumerate(nodes):
            if break_left and break_right:
                break
            if k == idx:
                continue
            rest_left = other.children[i]
            rest_right = other.children[j + len(other.children) - tree_len]
            break_left = break_left or tree_left != rest_left
            # stop looking on the right once the left part overlaps it
            break_right = break_right or (not break_left and j <= i)
            break_right = break_right or tree_right != rest_right
        if not break_left:
            common_total += 1
            left.append(tree_left)
        if not break_right:
            common_total += 1
            last_right = j
            right[j] = tree_right

    return left, [n for n in right[last_right:] if n is not None]


def append_unique(target: list[Node], value: Node) -> list[Node]:
    """Return ``target`` with ``value`` appended unless an equal node is already there."""
    if value in target:
        return target
    return [*target, value]


def same_kind(nodes: Sequence[Node], kind: NodeType) -> bool:
    """Tell whether every node is of ``kind``."""
    return all(n.kind is kind for n in nodes)


def one_with_least_children(nodes: Sequence[Node]) -> int:
    """Return the position of the first node with the fewest children, or -1."""
    if not nodes:
        return -1
    return min(range(len(nodes)), key=lambda i: len(nodes[i].children))


def nodes_equal(a: Sequence[Node], b: Sequence[Node]) -> bool:
    """Tell whether two node sequences are pairwise equal."""
    return list(a) == list(b)