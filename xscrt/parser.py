"""Sequential reading of an element's child elements and attributes."""

from __future__ import annotations

from collections import deque
from typing import Deque
from xml.dom import Node

from .xml import Attribute, Element


class Parser:
    """Hands out the child elements and the attributes of an element in order."""

    def __init__(self, element: Element) -> None:
        node = element.dom_element()
        self._elements: Deque[Node] = deque(
            child for child in node.childNodes if child.nodeType == Node.ELEMENT_NODE
        )
        attributes = node.attributes
        self._attributes: Deque[Node] = deque(
            attributes.values() if attributes is not None else ()
        )

    def more_elements(self) -> bool:
        """Return True while child elements remain."""
        return bool(self._elements)

    def next_element(self) -> Element:
        """Return the next child element; IndexError when none remain."""
        return Element(self._elements.popleft())

    def more_attributes(self) -> bool:
        """Return True while attributes remain."""
        return bool(self._attributes)

    def next_attribute(self) -> Attribute:
        """Return the next attribute; IndexError when none remain."""
        return Attribute(self._attributes.popleft())