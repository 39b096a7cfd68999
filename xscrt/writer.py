"""Writing schema objects into DOM elements and attributes."""

from __future__ import annotations

from typing import List, Optional

from .elements import FundamentalType
from .schema_types import IDREF
from .traversal import Traverser
from .xml import Attribute, Element


class Writer:
    """A stack of elements being written, with an optional current attribute."""

    def __init__(self, element: Element) -> None:
        self._stack: List[Element] = [element]
        self._attr: Optional[Attribute] = None

    def push(self, element: Element) -> None:
        """Make element the one being written."""
        self._stack.append(element)

    def pop(self) -> Element:
        """Return to the previous element; returns the one left."""
        return self._stack.pop()

    def top(self) -> Element:
        """Return the element being written."""
        return self._stack[-1]

    def attr(self) -> Optional[Attribute]:
        """Return the attribute being written, if any."""
        return self._attr

    def set_attr(self, attribute: Optional[Attribute]) -> None:
        """Set or clear the attribute being written."""
        self._attr = attribute

    def _emit(self, text: str) -> None:
        attribute = self.attr()
        if attribute is not None:
            attribute.set_value(text)
        else:
            self.top().set_value(text)


class FundamentalTypeWriter(Traverser, Writer):
    """Writes a fundamental value as text into the current attribute or element."""

    def __init__(self, element: Element, node_type: Optional[type] = None) -> None:
        Traverser.__init__(self, node_type)
        Writer.__init__(self, element)

    def traverse(self, node: FundamentalType) -> None:
        """Write the value's text form."""
        self._emit(str(node))


class IDREFWriter(Traverser, Writer):
    """Writes the name a reference points at."""

    node_type = IDREF

    def __init__(self, element: Element) -> None:
        Traverser.__init__(self)
        Writer.__init__(self, element)

    def traverse(self, node: IDREF) -> None:
        """Write the referenced name."""
        self._emit(str(node.id()))