"""Type-directed dispatch of objects to the traversers registered for them."""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    Set,
    Tuple,
)

from .typeinfo import ExtendedTypeInfo, extended_type_info


def _compute_levels(
    info: ExtendedTypeInfo, current: int, levels: Dict[ExtendedTypeInfo, int]
) -> int:
    """Record how far each type sits from the dispatched one; return the deepest."""
    if levels.get(info, -1) < current:
        levels[info] = current
    deepest = current
    for base in info.bases():
        deepest = max(deepest, _compute_levels(base.type_info(), current + 1, levels))
    return deepest


def _flatten_tree(info: ExtendedTypeInfo, seen: Set[ExtendedTypeInfo]) -> None:
    """Collect a type and all of its bases."""
    seen.add(info)
    for base in info.bases():
        _flatten_tree(base.type_info(), seen)


def _dispatch(table: Dict[Hashable, List["Traverser"]], node: Any) -> None:
    """Hand node to the traversers of its most derived mapped types.

    Types are visited from the node's own type outwards; once a type has
    been handled, none of its bases is handled again.
    """
    levels: Dict[ExtendedTypeInfo, int] = {}
    deepest = _compute_levels(extended_type_info(node), 0, levels)

    for level in range(deepest + 1):
        dispatched: Set[ExtendedTypeInfo] = set()
        for info, info_level in list(levels.items()):
            if info_level != level:
                continue
            traversers = table.get(info.type_id)
            if traversers is None:
                continue
            for traverser in traversers:
                traverser.trampoline(node)
            _flatten_tree(info, dispatched)
        for info in dispatched:
            levels.pop(info, None)


class Dispatcher:
    """Routes objects to traversers by their type.

    Traversers mapped on the dispatcher itself, and those taken over from
    other dispatchers with traverser(), all take part in dispatch().
    """

    def __init__(self) -> None:
        self._own: Dict[Hashable, List[Traverser]] = {}
        self._delegate: Dict[Hashable, List[Traverser]] = {}
        self._merge_pending = True

    def map(self, type_id: Hashable, traverser: "Traverser") -> None:
        """Register a traverser for a type on this dispatcher."""
        self._own.setdefault(type_id, []).append(traverser)

    def items(self) -> List[Tuple[Hashable, Tuple["Traverser", ...]]]:
        """Return the type ids mapped on this dispatcher with their traversers."""
        return [(type_id, tuple(traversers)) for type_id, traversers in self._own.items()]

    def traverser(self, other: "Dispatcher") -> None:
        """Take over every mapping of another dispatcher for dispatching."""
        for type_id, traversers in other.items():
            self._delegate.setdefault(type_id, []).extend(traversers)

    def dispatch(self, node: Any) -> None:
        """Send node to the traversers that handle its type."""
        if self._merge_pending:
            for type_id, traversers in self._own.items():
                self._delegate.setdefault(type_id, []).extend(traversers)
            self._merge_pending = False
        _dispatch(self._delegate, node)

    def iterate_and_dispatch(
        self, items: Iterable[Any], between: Callable[[], Any]
    ) -> None:
        """Dispatch each item, calling between() between consecutive items."""
        first = True
        for item in items:
            if not first:
                between()
            first = False
            self.dispatch(item)


class Traverser(Dispatcher):
    """A dispatcher that itself handles objects of one type.

    Set node_type on a subclass, or pass it to the constructor, and
    override traverse().
    """

    node_type: ClassVar[Optional[type]] = None

    def __init__(self, node_type: Optional[type] = None) -> None:
        super().__init__()
        if node_type is not None:
            self.node_type = node_type
        if self.node_type is None:
            raise TypeError(f"{type(self).__name__} has no node type")
        self.map(self.node_type, self)

    def traverse(self, node: Any) -> None:
        """Handle one object; subclasses define what that means."""
        raise TypeError(
            f"{type(self).__name__} does not define how to traverse "
            f"{type(node).__name__}"
        )

    def trampoline(self, node: Any) -> None:
        """Check that node is of the handled type and traverse it."""
        if not isinstance(node, self.node_type):
            raise TypeError(
                f"{type(node).__name__} is not a {self.node_type.__name__}"
            )
        self.traverse(node)