"""Document tree model and html5lib tree construction.

Key Components:
    Node and its subclasses: the closed set of node kinds of a parsed document
    QualName, Attribute: namespaced names and element attributes
    NodeTreeBuilder: html5lib tree builder producing the node model
"""

from .builder import NodeTreeBuilder
from .nodes import (
    HTML_NAMESPACE,
    NO_NAMESPACE,
    Attribute,
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    NodeKind,
    ProcessingInstruction,
    QualName,
    Text,
)

__all__ = [
    "HTML_NAMESPACE",
    "NO_NAMESPACE",
    "Attribute",
    "Comment",
    "Doctype",
    "Document",
    "Element",
    "Node",
    "NodeKind",
    "NodeTreeBuilder",
    "ProcessingInstruction",
    "QualName",
    "Text",
]
