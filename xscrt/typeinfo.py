"""Extended run-time type information: a registry of types and their bases."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Optional, Tuple


class Access(enum.Enum):
    """Access level of a base class."""

    PRIVATE = 0
    PROTECTED = 1
    PUBLIC = 2


class NotAvailable(LookupError):
    """Raised when no extended type information is registered for a type."""


_REGISTRY: Dict[Hashable, "ExtendedTypeInfo"] = {}


def extended_type_info_map() -> Dict[Hashable, "ExtendedTypeInfo"]:
    """Return the process-wide map from type id to its extended type info."""
    return _REGISTRY


def extended_type_info(target: Any) -> "ExtendedTypeInfo":
    """Look up the extended type info of a class, or of an object's class.

    Raises NotAvailable if nothing is registered for it.
    """
    key = target if isinstance(target, type) else type(target)
    try:
        return _REGISTRY[key]
    except KeyError:
        raise NotAvailable(getattr(key, "__name__", repr(key))) from None


@dataclass
class BaseInfo:
    """One base of a type: its access, virtuality and type id."""

    access: Access
    virtual_base: bool
    type_id: Hashable
    _info: Optional["ExtendedTypeInfo"] = field(
        default=None, init=False, repr=False, compare=False
    )

    def type_info(self) -> "ExtendedTypeInfo":
        """Return the base's extended type info, looked up once and cached."""
        if self._info is None:
            self._info = extended_type_info(self.type_id)
        return self._info


class ExtendedTypeInfo:
    """Type information for one type, with the list of its direct bases."""

    def __init__(self, type_id: Hashable) -> None:
        self.type_id = type_id
        self._bases: list[BaseInfo] = []

    def add_base(self, access: Access, virtual_base: bool, type_id: Hashable) -> None:
        """Append a direct base."""
        self._bases.append(BaseInfo(access, virtual_base, type_id))

    def bases(self) -> Tuple[BaseInfo, ...]:
        """Return the direct bases in the order they were added."""
        return tuple(self._bases)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtendedTypeInfo):
            return NotImplemented
        return self.type_id == other.type_id

    def __hash__(self) -> int:
        return hash(self.type_id)

    def __repr__(self) -> str:
        name = getattr(self.type_id, "__name__", repr(self.type_id))
        return f"ExtendedTypeInfo({name}, bases={len(self._bases)})"