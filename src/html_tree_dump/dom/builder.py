"""html5lib tree builder producing the typed node model.

html5lib drives tree construction through a small node interface
(``appendChild``, ``insertText``, ``reparentChildren``...). The handles below
implement that interface on top of :mod:`html_tree_dump.dom.nodes`, in the same
way html5lib's own ``dom`` builder wraps ``xml.dom.minidom`` nodes.
"""

from collections.abc import MutableMapping
from typing import Dict, Iterator, Optional, Tuple, Union

from html5lib.constants import namespaces
from html5lib.treebuilders import base

from html_tree_dump.dom.nodes import (
    NO_NAMESPACE,
    Attribute,
    Comment,
    Doctype,
    Document,
    Element,
    Node,
    QualName,
)

# html5lib keys plain attributes by name and foreign ones by
# (prefix, local name, namespace).
AttributeKey = Union[str, Tuple[Optional[str], str, str]]


def _key_to_qualname(key: AttributeKey) -> QualName:
    if isinstance(key, tuple):
        prefix, local, ns = key
        return QualName(ns or NO_NAMESPACE, local, prefix)
    return QualName.plain(key)


def _qualname_to_key(name: QualName) -> AttributeKey:
    if name.ns == NO_NAMESPACE:
        return name.local
    return (name.prefix, name.local, name.ns)


class AttributeMap(MutableMapping):
    """Mapping view over an element's ordered attribute list."""

    def __init__(self, element: Element):
        self.element = element

    def _find(self, key: AttributeKey) -> Optional[Attribute]:
        wanted = _key_to_qualname(key)
        for attribute in self.element.attributes:
            if attribute.name.ns == wanted.ns and attribute.name.local == wanted.local:
                return attribute
        return None

    def __getitem__(self, key: AttributeKey) -> str:
        attribute = self._find(key)
        if attribute is None:
            raise KeyError(key)
        return attribute.value

    def __setitem__(self, key: AttributeKey, value: str) -> None:
        attribute = self._find(key)
        if attribute is None:
            self.element.attributes.append(Attribute(_key_to_qualname(key), value))
        else:
            attribute.value = value

    def __delitem__(self, key: AttributeKey) -> None:
        attribute = self._find(key)
        if attribute is None:
            raise KeyError(key)
        self.element.attributes.remove(attribute)

    def __iter__(self) -> Iterator[AttributeKey]:
        return iter([_qualname_to_key(a.name) for a in self.element.attributes])

    def __len__(self) -> int:
        return len(self.element.attributes)


class NodeHandle(base.Node):
    """Wraps a model node for html5lib's tree construction algorithm."""

    namespace: Optional[str] = None

    def __init__(self, node: Node, name: Optional[str] = None):
        self.node = node
        base.Node.__init__(self, name)

    def appendChild(self, node: "NodeHandle") -> None:
        node.parent = self
        self.node.append_child(node.node)

    def insertText(self, data: str, insertBefore: Optional["NodeHandle"] = None) -> None:
        if insertBefore is None:
            self.node.append_text(data)
        else:
            self.node.insert_text_before(data, insertBefore.node)

    def insertBefore(self, node: "NodeHandle", refNode: "NodeHandle") -> None:
        self.node.insert_before(node.node, refNode.node)
        node.parent = self

    def removeChild(self, node: "NodeHandle") -> None:
        if node.node.parent is self.node:
            self.node.remove_child(node.node)
        node.parent = None

    def reparentChildren(self, newParent: "NodeHandle") -> None:
        self.node.reparent_children(newParent.node)
        self.childNodes = []

    def hasContent(self) -> bool:
        return bool(self.node.children)


class ElementHandle(NodeHandle):
    """Handle for element nodes, exposing names and attributes to html5lib."""

    node: Element

    def __init__(self, element: Element, namespace: Optional[str]):
        self.namespace = namespace
        NodeHandle.__init__(self, element, element.name.local)

    @property
    def nameTuple(self) -> Tuple[str, str]:
        if self.namespace is None:
            return namespaces["html"], self.name
        return self.namespace, self.name

    def _get_attributes(self) -> AttributeMap:
        return AttributeMap(self.node)

    def _set_attributes(self, attributes: Dict[AttributeKey, str]) -> None:
        items = list(attributes.items()) if attributes else []
        self.node.attributes = []
        mapping = AttributeMap(self.node)
        for key, value in items:
            mapping[key] = value

    attributes = property(_get_attributes, _set_attributes)

    def cloneNode(self) -> "ElementHandle":
        clone = ElementHandle(Element(self.node.name), self.namespace)
        clone.node.attributes = [Attribute(a.name, a.value) for a in self.node.attributes]
        return clone


class NodeTreeBuilder(base.TreeBuilder):
    """html5lib tree builder whose document is a :class:`Document`.

    Pass the class itself to ``html5lib.HTMLParser(tree=NodeTreeBuilder)``.
    """

    def documentClass(self) -> NodeHandle:
        return NodeHandle(Document())

    def elementClass(self, name: str, namespace: Optional[str] = None) -> ElementHandle:
        qualname = QualName(namespace or NO_NAMESPACE, name)
        return ElementHandle(Element(qualname), namespace)

    def commentClass(self, data: str) -> NodeHandle:
        return NodeHandle(Comment(data))

    def doctypeClass(
        self,
        name: Optional[str],
        publicId: Optional[str],
        systemId: Optional[str],
    ) -> NodeHandle:
        return NodeHandle(Doctype(name or "", publicId or "", systemId or ""))

    def getDocument(self) -> Document:
        return self.document.node
