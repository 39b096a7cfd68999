"""Links IDREF objects to the objects carrying the matching ID."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .elements import Type


class NullEntryError(ValueError):
    """Raised when None is added as an ID or IDREF object."""


class UnresolvedIDREF(LookupError):
    """Raised when a reference names an ID that was never added."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IDMap:
    """Collects IDs and IDREFs from a document and resolves the references."""

    def __init__(self) -> None:
        self._ids: Dict[str, Type] = {}
        self._idrefs: List[Tuple[str, Type]] = []

    def add_id(self, id_: str, obj: Optional[Type]) -> None:
        """Record the object carrying an ID; the first object for an ID wins."""
        if obj is None:
            raise NullEntryError(id_)
        self._ids.setdefault(id_, obj)

    def add_idref(self, idref: str, obj: Optional[Type]) -> None:
        """Record an object that refers to an ID."""
        if obj is None:
            raise NullEntryError(idref)
        self._idrefs.append((idref, obj))

    def resolve_single_idref(self, idref: str, element: Type) -> None:
        """Point element's reference at the object with that ID."""
        try:
            target = self._ids[idref]
        except KeyError:
            raise UnresolvedIDREF(idref) from None
        element.set_idref(idref, target)

    def resolve_idref(self) -> None:
        """Resolve every recorded reference, in order of the referenced name."""
        for idref, element in sorted(self._idrefs, key=lambda entry: entry[0]):
            try:
                target = self._ids[idref]
            except KeyError:
                raise UnresolvedIDREF(idref) from None
            element.set_idref(idref, target)