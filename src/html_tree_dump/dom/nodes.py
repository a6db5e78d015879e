"""Typed node model for parsed HTML documents.

Every node kind of the closed set produced by HTML tree construction has its
own class. Parents own their children; each child keeps a back-reference to
its parent so the tree builder can move nodes around while parsing.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Iterator, List, Optional

HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
NO_NAMESPACE = ""


class NodeKind(Enum):
    """Discriminant of the node union."""

    DOCUMENT = auto()
    DOCTYPE = auto()
    TEXT = auto()
    COMMENT = auto()
    ELEMENT = auto()
    PROCESSING_INSTRUCTION = auto()


@dataclass(frozen=True)
class QualName:
    """A local name paired with a namespace URI."""

    ns: str
    local: str
    prefix: Optional[str] = None

    @classmethod
    def html(cls, local: str) -> "QualName":
        """Name in the HTML namespace."""
        return cls(HTML_NAMESPACE, local)

    @classmethod
    def plain(cls, local: str) -> "QualName":
        """Name in the empty namespace, as used by ordinary attributes."""
        return cls(NO_NAMESPACE, local)


@dataclass
class Attribute:
    """A single element attribute."""

    name: QualName
    value: str


class Node:
    """Base class of all tree nodes.

    Subclasses are dataclasses holding the kind-specific data; the tree links
    live here and are set up by ``__post_init__``.
    """

    kind: ClassVar[NodeKind]

    def __init__(self) -> None:
        self.parent: Optional["Node"] = None
        self.children: List["Node"] = []

    def __post_init__(self) -> None:
        Node.__init__(self)

    def detach(self) -> None:
        """Remove this node from its parent, if it has one."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def append_child(self, child: "Node") -> None:
        """Append ``child`` as the last child, moving it if already placed."""
        child.detach()
        child.parent = self
        self.children.append(child)

    def insert_before(self, child: "Node", reference: "Node") -> None:
        """Insert ``child`` right before ``reference``.

        Raises:
            ValueError: If ``reference`` is not a child of this node.
        """
        if reference.parent is not self:
            raise ValueError("Reference node is not a child of this node")
        child.detach()
        index = self.children.index(reference)
        child.parent = self
        self.children.insert(index, child)

    def remove_child(self, child: "Node") -> None:
        """Remove ``child`` and clear its parent link."""
        self.children.remove(child)
        child.parent = None

    def reparent_children(self, new_parent: "Node") -> None:
        """Move all children, in order, to the end of ``new_parent``."""
        for child in list(self.children):
            new_parent.append_child(child)

    def append_text(self, data: str) -> None:
        """Append character data, extending a trailing text node if present."""
        if self.children and isinstance(self.children[-1], Text):
            self.children[-1].append(data)
        else:
            self.append_child(Text(data))

    def insert_text_before(self, data: str, reference: "Node") -> None:
        """Insert character data before ``reference``.

        The data extends the text node directly preceding ``reference`` when
        there is one.
        """
        index = self.children.index(reference)
        previous = self.children[index - 1] if index > 0 else None
        if isinstance(previous, Text):
            previous.append(data)
        else:
            self.insert_before(Text(data), reference)

    def iter_descendants(self) -> Iterator["Node"]:
        """Yield all descendants in document order."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(eq=False)
class Document(Node):
    """Root of a parsed document."""

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT


@dataclass(eq=False)
class Doctype(Node):
    """``<!DOCTYPE>`` declaration."""

    kind: ClassVar[NodeKind] = NodeKind.DOCTYPE

    name: str = ""
    public_id: str = ""
    system_id: str = ""


@dataclass(eq=False)
class Text(Node):
    """Character data."""

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    contents: str = ""

    def append(self, data: str) -> None:
        self.contents += data


@dataclass(eq=False)
class Comment(Node):
    kind: ClassVar[NodeKind] = NodeKind.COMMENT

    contents: str = ""


@dataclass(eq=False)
class Element(Node):
    """An element with its qualified name and ordered attributes."""

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    name: QualName
    attributes: List[Attribute] = field(default_factory=list)


@dataclass(eq=False)
class ProcessingInstruction(Node):
    """Processing instruction; never produced by HTML tree construction."""

    kind: ClassVar[NodeKind] = NodeKind.PROCESSING_INSTRUCTION

    target: str = ""
    data: str = ""
