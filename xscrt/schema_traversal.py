"""Traversers for the built-in schema types."""

from __future__ import annotations

from .schema_types import IDREFBase
from .traversal import Traverser


class IDREFTraverser(Traverser):
    """Follows a reference and dispatches the object it points at."""

    node_type = IDREFBase

    def traverse(self, node: IDREFBase) -> None:
        """Dispatch the referenced object, if the reference resolves."""
        target = node.get()
        if target is not None:
            self.dispatch(target)