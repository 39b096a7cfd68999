"""Thin wrappers over DOM elements and attributes, plus qualified-name helpers."""

from __future__ import annotations

from typing import Optional
from xml.dom import Node


class NoPrefixError(LookupError):
    """Raised when a namespace has no prefix and is not the default one."""


def _text_content(node: Node) -> str:
    parts = []
    for child in node.childNodes:
        if child.nodeType in (Node.TEXT_NODE, Node.CDATA_SECTION_NODE):
            parts.append(child.data)
        elif child.nodeType == Node.ELEMENT_NODE:
            parts.append(_text_content(child))
    return "".join(parts)


def _attribute_items(node: Node):
    attributes = node.attributes
    return list(attributes.items()) if attributes is not None else []


def _lookup_namespace_uri(node: Node, prefix_: Optional[str]) -> Optional[str]:
    while node is not None and node.nodeType == Node.ELEMENT_NODE:
        if node.namespaceURI and node.prefix == prefix_:
            return node.namespaceURI
        wanted = "xmlns" if prefix_ is None else f"xmlns:{prefix_}"
        for name, value in _attribute_items(node):
            if name == wanted:
                return value or None
        node = node.parentNode
    return None


def _lookup_prefix(node: Node, ns: str) -> Optional[str]:
    if not ns:
        return None
    start = node
    while node is not None and node.nodeType == Node.ELEMENT_NODE:
        if node.namespaceURI == ns and node.prefix:
            return node.prefix
        for name, value in _attribute_items(node):
            if name.startswith("xmlns:") and value == ns:
                candidate = name[len("xmlns:"):]
                if _lookup_namespace_uri(start, candidate) == ns:
                    return candidate
        node = node.parentNode
    return None


def _is_default_namespace(node: Node, ns: str) -> bool:
    while node is not None and node.nodeType == Node.ELEMENT_NODE:
        if not node.prefix:
            return (node.namespaceURI or "") == ns
        for name, value in _attribute_items(node):
            if name == "xmlns":
                return value == ns
        node = node.parentNode
    return False


class Element:
    """A DOM element with its local name and namespace."""

    def __init__(self, node: Node) -> None:
        self._node = node
        self._name = node.localName or ""
        self._namespace = node.namespaceURI or ""

    @classmethod
    def create(cls, name: str, parent: "Element", ns: Optional[str] = None) -> "Element":
        """Create a new element and append it to parent.

        With a namespace, the element is qualified with the prefix bound to
        that namespace in parent's scope.
        """
        parent_node = parent.dom_element()
        document = parent_node.ownerDocument
        if ns is None:
            node = document.createElement(name)
        else:
            bound = ns_prefix(ns, parent)
            node = document.createElementNS(ns, f"{bound}:{name}" if bound else name)
        parent_node.appendChild(node)
        element = cls(node)
        element._name = name
        element._namespace = ns or ""
        return element

    def name(self) -> str:
        """Return the local name."""
        return self._name

    def namespace(self) -> str:
        """Return the namespace URI, empty if there is none."""
        return self._namespace

    def parent(self) -> Optional["Element"]:
        """Return the parent element, or None at the document root."""
        parent_node = self._node.parentNode
        if parent_node is None or parent_node.nodeType != Node.ELEMENT_NODE:
            return None
        return Element(parent_node)

    def value(self) -> str:
        """Return all text contained in the element."""
        return _text_content(self._node)

    def set_value(self, value: str) -> None:
        """Append a text node holding value."""
        self._node.appendChild(self._node.ownerDocument.createTextNode(value))

    def __getitem__(self, name: str) -> str:
        """Return the value of the named attribute, empty if absent."""
        return self._node.getAttribute(name)

    def dom_element(self) -> Node:
        """Return the wrapped DOM element."""
        return self._node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"Element({self._name!r}, namespace={self._namespace!r})"


class Attribute:
    """A DOM attribute with its local name and value."""

    def __init__(self, node: Node) -> None:
        self._node = node
        self._name = node.localName or ""
        self._value = node.value or ""

    @classmethod
    def create(
        cls, name: str, value: str, parent: Element, ns: Optional[str] = None
    ) -> "Attribute":
        """Create an attribute on parent, qualified when a namespace is given."""
        parent_node = parent.dom_element()
        document = parent_node.ownerDocument
        if ns is None:
            node = document.createAttribute(name)
        else:
            bound = ns_prefix(ns, parent)
            node = document.createAttributeNS(ns, f"{bound}:{name}" if bound else name)
        attribute = cls(node)
        attribute._name = name
        attribute.set_value(value)
        if ns is None:
            parent_node.setAttributeNode(node)
        else:
            parent_node.setAttributeNodeNS(node)
        return attribute

    def name(self) -> str:
        """Return the local name."""
        return self._name

    def value(self) -> str:
        """Return the value."""
        return self._value

    def set_value(self, value: str) -> None:
        """Change the value."""
        self._value = value
        self._node.value = value

    def dom_attribute(self) -> Node:
        """Return the wrapped DOM attribute."""
        return self._node

    def __repr__(self) -> str:
        return f"Attribute({self._name!r}, {self._value!r})"


def prefix(name: str) -> str:
    """Return the prefix of a qualified name, empty if it has none."""
    head, sep, _ = name.partition(":")
    return head if sep else ""


def uq_name(name: str) -> str:
    """Return a qualified name without its prefix."""
    head, sep, tail = name.partition(":")
    return tail if sep else head


def ns_name(element: Element, name: str) -> str:
    """Return the namespace a qualified name refers to in element's scope."""
    bound = prefix(name)
    found = _lookup_namespace_uri(element.dom_element(), bound or None)
    return found or ""


def fq_name(element: Element, name: str) -> str:
    """Return the name as namespace#local, or just local without a namespace."""
    ns = ns_name(element, name)
    local = uq_name(name)
    return f"{ns}#{local}" if ns else local


def ns_prefix(ns: str, element: Element) -> str:
    """Return the prefix bound to ns in element's scope.

    An empty string means ns is the default namespace; NoPrefixError is
    raised when ns is neither bound nor the default.
    """
    node = element.dom_element()
    found = _lookup_prefix(node, ns)
    if found is None:
        if _is_default_namespace(node, ns):
            return ""
        raise NoPrefixError(ns)
    return found