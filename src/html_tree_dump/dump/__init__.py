"""Tree dump generation.

Key Components:
    escape_default: single-line escaping of text and comment contents
    indent_unit, indent_units, indent: indentation helpers
    format_node: one-line rendering of a single node
    render: full indented dump of a node and its subtree
"""

from .formatter import format_node
from .text import escape_default, indent, indent_unit, indent_units
from .walker import count_nodes, iter_lines, render

__all__ = [
    "count_nodes",
    "escape_default",
    "format_node",
    "indent",
    "indent_unit",
    "indent_units",
    "iter_lines",
    "render",
]
