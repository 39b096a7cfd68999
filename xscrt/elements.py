"""Base object model: containment, identity registration and fundamental values."""

from __future__ import annotations

import abc
import re
from typing import Any, ClassVar, Dict, Hashable, Optional, Tuple


class IdentityProvider(abc.ABC):
    """Something that identifies an object; identities are compared by key."""

    @abc.abstractmethod
    def key(self) -> Hashable:
        """Return the value that identifies the object."""

    def before(self, other: "IdentityProvider") -> bool:
        """Return True if this identity orders before the other one."""
        return self.key() < other.key()


class IdRegistrationError(LookupError):
    """Raised on a duplicate registration or removal of an unknown identity."""


class Type:
    """Base of every schema object.

    An object may sit inside a container; identities registered on an object
    are also registered on each of its containers up to the root.
    """

    def __init__(self) -> None:
        self._container: Optional[Type] = None
        self._ids: Optional[Dict[Hashable, Tuple[IdentityProvider, Type]]] = None
        self._idrefs: Dict[str, Type] = {}

    def container(self) -> "Type":
        """Return the containing object, or the object itself if it has none."""
        return self._container if self._container is not None else self

    def root(self) -> "Type":
        """Return the outermost container."""
        current = self.container()
        parent = current.container()
        while parent is not current:
            current = parent
            parent = current.container()
        return current

    def set_container(self, container: Optional["Type"]) -> None:
        """Move the object into a new container, carrying its registrations."""
        if self._container is container:
            return
        if self._ids:
            if self._container is not None:
                for identity, _ in list(self._ids.values()):
                    self._container.unregister_id(identity)
            if container is not None:
                for identity, target in list(self._ids.values()):
                    container.register_id(identity, target)
        self._container = container

    def register_id(self, identity: IdentityProvider, target: "Type") -> None:
        """Register target under identity here and in every container above."""
        if self._ids is None:
            self._ids = {}
        key = identity.key()
        if key in self._ids:
            raise IdRegistrationError(f"identity {key!r} is already registered")
        self._ids[key] = (identity, target)
        container = self.container()
        if container is not self:
            container.register_id(identity, target)

    def unregister_id(self, identity: IdentityProvider) -> None:
        """Remove identity here and in every container above."""
        key = identity.key()
        if not self._ids or key not in self._ids:
            raise IdRegistrationError(f"identity {key!r} is not registered")
        del self._ids[key]
        container = self.container()
        if container is not self:
            container.unregister_id(identity)

    def lookup_id(self, identity: IdentityProvider) -> Optional["Type"]:
        """Return the object registered under identity, or None."""
        if not self._ids:
            return None
        entry = self._ids.get(identity.key())
        return entry[1] if entry is not None else None

    def get_idref(self, name: str) -> Optional["Type"]:
        """Return the object the named reference resolved to, or None."""
        return self._idrefs.get(name)

    def set_idref(self, name: str, target: "Type") -> None:
        """Record a resolved reference; an existing entry is kept."""
        self._idrefs.setdefault(name, target)


_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class FundamentalType(Type):
    """A schema object wrapping one value of a built-in type.

    Subclasses set value_type; integer subclasses may set bits and signed to
    fix the width that parsed values are narrowed to.
    """

    value_type: ClassVar[type] = int
    bits: ClassVar[Optional[int]] = None
    signed: ClassVar[bool] = True

    def __init__(self, value: Any = None) -> None:
        super().__init__()
        self.value = self.value_type() if value is None else self.value_type(value)

    @classmethod
    def from_text(cls, text: str) -> "FundamentalType":
        """Build the value from its text form in a document."""
        return cls(cls._parse(text))

    @classmethod
    def _parse(cls, text: str) -> Any:
        if cls.value_type is bool:
            return text in ("true", "1")
        if issubclass(cls.value_type, int):
            match = _INT_PREFIX.match(text)
            if match is None:
                return cls.value_type()
            return cls._narrow(int(match.group(1)))
        if issubclass(cls.value_type, float):
            match = _FLOAT_PREFIX.match(text)
            if match is None:
                return cls.value_type()
            return cls.value_type(match.group(1))
        return cls.value_type(text)

    @classmethod
    def _narrow(cls, number: int) -> int:
        if cls.bits is None:
            return number
        span = 1 << cls.bits
        number %= span
        if cls.signed and number >= span // 2:
            number -= span
        return number

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FundamentalType):
            return self.value == other.value
        return self.value == other

    def __hash__(self) -> int:
        return hash(self.value)

    def __bool__(self) -> bool:
        return bool(self.value)

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        if isinstance(self.value, bool):
            return "1" if self.value else "0"
        if isinstance(self.value, float):
            return format(self.value, "g")
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"