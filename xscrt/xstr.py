"""A mutable text holder with append, erase and a cached encoded form."""

from __future__ import annotations

from typing import Iterator, Optional, Union

_ENCODING = "utf-8"


class XStr:
    """Mutable text that also hands out an encoded byte form on demand.

    The byte form is computed once and kept until the text changes.
    """

    def __init__(self, value: Union[str, bytes, "XStr", None] = "") -> None:
        if isinstance(value, XStr):
            text = value._text
        elif isinstance(value, bytes):
            text = value.decode(_ENCODING)
        elif value is None:
            text = ""
        else:
            text = str(value)
        self._text: str = text
        self._encoded: Optional[bytes] = None

    def _replace(self, text: str) -> None:
        self._text = text
        self._encoded = None

    def append(self, tail: Union[str, "XStr", None]) -> None:
        """Add text to the end."""
        if tail is None:
            return
        self._replace(self._text + str(tail))

    def erase(self, head: int, tail: int) -> None:
        """Remove the characters from position head up to, not including, tail.

        Raises IndexError unless 0 <= head <= tail <= len(self).
        """
        if not 0 <= head <= tail <= len(self._text):
            raise IndexError(
                f"cannot erase [{head}, {tail}) from text of length {len(self._text)}"
            )
        self._replace(self._text[:head] + self._text[tail:])

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, index: Union[int, slice]) -> str:
        return self._text[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, XStr):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"XStr({self._text!r})"

    def release(self) -> str:
        """Hand over the text and leave this holder empty."""
        text = self._text
        self._replace("")
        return text

    def c_str(self) -> bytes:
        """Return the encoded form of the text, cached until it changes."""
        if self._encoded is None:
            self._encoded = self._text.encode(_ENCODING)
        return self._encoded