"""Depth-first traversal assembling the full tree dump.

The output is one line per node, ``indent(depth) + format_node(node) + "\\n"``,
each node followed by its children at ``depth + 1`` in document order. The
traversal keeps an explicit stack instead of recursing, so deeply nested
documents are limited by memory rather than by the interpreter's recursion
limit.
"""

from typing import Iterator, List, Tuple

from html_tree_dump.dom.nodes import Node
from html_tree_dump.dump.formatter import format_node
from html_tree_dump.dump.text import indent


def iter_lines(node: Node, depth: int = 0) -> Iterator[str]:
    """Yield the dump lines of ``node`` and its descendants, newline-terminated."""
    if depth < 0:
        raise ValueError("depth must be >= 0")

    stack: List[Tuple[Node, int]] = [(node, depth)]
    while stack:
        current, level = stack.pop()
        yield indent(level, format_node(current)) + "\n"
        for child in reversed(current.children):
            stack.append((child, level + 1))


def render(node: Node, depth: int = 0) -> str:
    """Render ``node`` and its subtree; ``render(document)`` dumps a whole document."""
    return "".join(iter_lines(node, depth))


def count_nodes(node: Node) -> int:
    """Number of nodes in the subtree rooted at ``node``, ``node`` included."""
    return 1 + sum(1 for _ in node.iter_descendants())
