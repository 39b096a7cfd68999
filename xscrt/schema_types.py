"""The built-in XML Schema types and their extended type information."""

from __future__ import annotations

import abc
import math
import struct
from typing import Any, Dict, Hashable, Optional

from .elements import FundamentalType, IdentityProvider, Type
from .typeinfo import Access, ExtendedTypeInfo


class Byte(FundamentalType):
    """xs:byte, a signed 8-bit integer."""

    bits = 8
    signed = True


class UnsignedByte(FundamentalType):
    """xs:unsignedByte, an unsigned 8-bit integer."""

    bits = 8
    signed = False


class Short(FundamentalType):
    """xs:short, a signed 16-bit integer."""

    bits = 16
    signed = True


class UnsignedShort(FundamentalType):
    """xs:unsignedShort, an unsigned 16-bit integer."""

    bits = 16
    signed = False


class Int(FundamentalType):
    """xs:int, a signed 32-bit integer."""

    bits = 32
    signed = True


class UnsignedInt(FundamentalType):
    """xs:unsignedInt, an unsigned 32-bit integer."""

    bits = 32
    signed = False


class Long(FundamentalType):
    """xs:long, a signed 64-bit integer."""

    bits = 64
    signed = True


class UnsignedLong(FundamentalType):
    """xs:unsignedLong, an unsigned 64-bit integer."""

    bits = 64
    signed = False


# The arbitrary-precision integer types are held in a 64-bit integer.
Decimal = Long
Integer = Long
NonPositiveInteger = Long
NonNegativeInteger = Long
PositiveInteger = Long
NegativeInteger = Long


class Boolean(FundamentalType):
    """xs:boolean; "true" and "1" are true, anything else is false."""

    value_type = bool


class Float(FundamentalType):
    """xs:float, held at single precision."""

    value_type = float

    @classmethod
    def _parse(cls, text: str) -> Any:
        number = super()._parse(text)
        try:
            return struct.unpack("f", struct.pack("f", number))[0]
        except OverflowError:
            return math.copysign(math.inf, number)


class Double(FundamentalType):
    """xs:double."""

    value_type = float


class _Text(Type):
    """A schema object holding a piece of text."""

    def __init__(self, value: Any = "") -> None:
        super().__init__()
        self._text = str(value)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _Text):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (_Text, str)):
            return self._text < str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


class String(_Text):
    """xs:string."""

    @classmethod
    def from_node(cls, node: Any) -> "String":
        """Build the object from the text of an element or attribute."""
        return cls(node.value())

    def assign(self, value: Any) -> "String":
        """Replace the text; returns the object itself."""
        self._text = str(value)
        return self


class NormalizedString(String):
    """xs:normalizedString."""


class Token(NormalizedString):
    """xs:token."""


class NMToken(Token):
    """xs:NMTOKEN."""


class Name(Token):
    """xs:Name."""


class NCName(Name):
    """xs:NCName."""


class NCNameIdentity(IdentityProvider):
    """Identity given by the current text of an NCName."""

    def __init__(self, name: NCName) -> None:
        self._name = name

    def key(self) -> Hashable:
        """Return the name's current text."""
        return str(self._name)

    def before(self, other: IdentityProvider) -> bool:
        """Order identities by their names."""
        if not isinstance(other, NCNameIdentity):
            raise TypeError(f"cannot order against {type(other).__name__}")
        return str(self._name) < str(other._name)


class ID(NCName):
    """xs:ID; registers its container under its name while it has one."""

    def __init__(self, value: Any = "") -> None:
        super().__init__(value)
        self._identity = NCNameIdentity(self)

    def assign(self, value: Any) -> "ID":
        """Rename the ID, moving its registration to the new name."""
        self._unregister()
        self._text = str(value)
        self._register()
        return self

    def set_container(self, container: Optional[Type]) -> None:
        """Move into a new container, moving the registration along."""
        self._unregister()
        super().set_container(container)
        self._register()

    def _register(self) -> None:
        holder = self.container()
        if holder is not self and self._text:
            holder.register_id(self._identity, holder)

    def _unregister(self) -> None:
        holder = self.container()
        if holder is not self and self._text:
            holder.unregister_id(self._identity)


class IDREFBase(Type, abc.ABC):
    """A reference that can be followed to the object it names."""

    @abc.abstractmethod
    def get(self) -> Optional[Type]:
        """Return the referenced object, or None."""


class IDREF(IDREFBase):
    """xs:IDREF; looks its target up in the root of its container tree."""

    def __init__(self, value: Any = "") -> None:
        super().__init__()
        self._id = NCName(str(value))
        self._identity = NCNameIdentity(self._id)

    def id(self) -> NCName:
        """Return a copy of the referenced name."""
        return NCName(str(self._id))

    def assign(self, value: Any) -> "IDREF":
        """Point the reference at another name; returns the object itself."""
        self._id.assign(str(value))
        return self

    def get(self) -> Optional[Type]:
        """Return the object registered under the name at the root, or None."""
        if str(self._id) and self.container() is not self:
            return self.root().lookup_id(self._identity)
        return None

    def __bool__(self) -> bool:
        return self.get() is not None

    def __str__(self) -> str:
        return str(self._id)

    def __repr__(self) -> str:
        return f"IDREF({str(self._id)!r})"


class AnyURI(_Text):
    """xs:anyURI."""

    @classmethod
    def from_node(cls, node: Any) -> "AnyURI":
        """Build the object from the text of an element or attribute."""
        return cls(node.value())

    def assign(self, value: Any) -> "AnyURI":
        """Replace the URI text; returns the object itself."""
        self._text = str(value)
        return self


_DIRECT_TYPES = (
    Byte,
    UnsignedByte,
    Short,
    UnsignedShort,
    Int,
    UnsignedInt,
    Long,
    UnsignedLong,
    Boolean,
    Float,
    Double,
    String,
    NormalizedString,
    Token,
    NMToken,
    Name,
    NCName,
    ID,
    AnyURI,
)


def _add_info(type_map: Dict[Hashable, ExtendedTypeInfo], cls: type, base: type) -> None:
    if cls in type_map:
        return
    info = ExtendedTypeInfo(cls)
    info.add_base(Access.PUBLIC, False, base)
    type_map[cls] = info


def register_type_info(type_map: Dict[Hashable, ExtendedTypeInfo]) -> None:
    """Add the built-in types to a type-info map; existing entries are kept."""
    type_map.setdefault(Type, ExtendedTypeInfo(Type))
    for cls in _DIRECT_TYPES:
        _add_info(type_map, cls, Type)
    _add_info(type_map, IDREFBase, Type)
    _add_info(type_map, IDREF, IDREFBase)