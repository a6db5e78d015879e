"""Single-node formatting for the tree dump.

Each node kind maps to exactly one line fragment, without indentation, without
children and without a trailing newline.
"""

from html_tree_dump.dom.nodes import (
    HTML_NAMESPACE,
    NO_NAMESPACE,
    Comment,
    Doctype,
    Element,
    Node,
    NodeKind,
    Text,
)
from html_tree_dump.dump.text import escape_default
from html_tree_dump.shared.errors import TreeInvariantError


def _format_doctype(node: Doctype) -> str:
    return f'<!DOCTYPE {node.name} "{node.public_id}" "{node.system_id}">'


def _format_text(node: Text) -> str:
    return f"#text:{escape_default(node.contents)}"


def _format_comment(node: Comment) -> str:
    return f"<!-- {escape_default(node.contents)} -->"


def _format_element(node: Element) -> str:
    if node.name.ns != HTML_NAMESPACE:
        raise TreeInvariantError(
            f"Element <{node.name.local}> is in namespace {node.name.ns!r}, "
            f"expected {HTML_NAMESPACE!r}",
            node,
        )
    parts = [f"<{node.name.local}"]
    for attribute in node.attributes:
        if attribute.name.ns != NO_NAMESPACE:
            raise TreeInvariantError(
                f"Attribute {attribute.name.local!r} of <{node.name.local}> is in "
                f"namespace {attribute.name.ns!r}, expected the empty namespace",
                node,
            )
        # Values are written verbatim, quotes included.
        parts.append(f' {attribute.name.local}="{attribute.value}"')
    parts.append(">")
    return "".join(parts)


def format_node(node: Node) -> str:
    """Render ``node`` itself, ignoring its children.

    Raises:
        TreeInvariantError: For processing instructions, unknown node types,
            and elements or attributes outside the HTML/empty namespaces.
    """
    kind = getattr(node, "kind", None)
    if kind is NodeKind.DOCUMENT:
        return "#Document"
    if kind is NodeKind.DOCTYPE:
        return _format_doctype(node)
    if kind is NodeKind.TEXT:
        return _format_text(node)
    if kind is NodeKind.COMMENT:
        return _format_comment(node)
    if kind is NodeKind.ELEMENT:
        return _format_element(node)
    if kind is NodeKind.PROCESSING_INSTRUCTION:
        raise TreeInvariantError(
            "Processing instructions are never produced by HTML parsing", node
        )
    raise TreeInvariantError(f"Unknown node type {type(node).__name__}", node)
