"""Reading entities from XML documents and writing them back out.

A reader turns a parsed document into an entity with a reader function. A
writer builds a document around a root element and fills it from an entity
with a writer function.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Generic, Optional, TypeVar, Union
from xml.dom import minidom
from xml.dom.minidom import Document, DocumentType, getDOMImplementation

T = TypeVar("T")

ReaderFunction = Callable[[Document], Any]
WriterFunction = Callable[[Any, Document], None]

_XMLNS_NAMESPACE = "http://www.w3.org/2000/xmlns/"
_ENCODING = "UTF-8"


class DocumentBase(Generic[T]):
    """Holds the DOM document a reader or writer works on."""

    def __init__(self) -> None:
        self._implementation = getDOMImplementation()
        self._document: Optional[Document] = None

    def document(self) -> Optional[Document]:
        """Return the underlying document, or None if there is none yet."""
        return self._document


class Reader(DocumentBase[T]):
    """Turns a parsed document into an entity with a reader function."""

    def __init__(self, reader: Optional[ReaderFunction]) -> None:
        super().__init__()
        self._reader = reader

    def entity(self) -> Optional[T]:
        """Return the entity read from the document.

        Returns None while no document has been read or when there is no
        reader function.
        """
        if self._reader is None or self._document is None:
            return None
        return self._reader(self._document)


class FileReader(Reader[T]):
    """Reads a document from a file."""

    def read(self, filename: Union[str, os.PathLike]) -> Document:
        """Parse the file and keep the document.

        Raises OSError if the file cannot be opened and
        xml.parsers.expat.ExpatError if it is not well-formed.
        """
        with open(filename, "rb") as stream:
            self._document = minidom.parse(stream)
        return self._document


class BufferReader(Reader[T]):
    """Reads a document from bytes held in memory."""

    def __init__(self, reader: Optional[ReaderFunction], fake_id: str = "") -> None:
        super().__init__(reader)
        self.system_id = fake_id

    def read(self, buffer: Union[bytes, bytearray, memoryview, str]) -> Document:
        """Parse the buffer and keep the document.

        Raises xml.parsers.expat.ExpatError if the buffer is not well-formed.
        """
        data = buffer.encode(_ENCODING) if isinstance(buffer, str) else bytes(buffer)
        self._document = minidom.parseString(data)
        return self._document


class DocumentWriter(DocumentBase[T]):
    """Builds a document with a given root and fills it from an entity."""

    def __init__(
        self,
        ns: Optional[str],
        root: str,
        writer: Optional[WriterFunction],
        doctype: Optional[DocumentType] = None,
    ) -> None:
        super().__init__()
        self._writer = writer
        namespace = ns or None
        self._document = self._implementation.createDocument(namespace, root, doctype)
        if namespace is not None:
            element = self._document.documentElement
            head, sep, _ = root.partition(":")
            declaration = f"xmlns:{head}" if sep else "xmlns"
            element.setAttributeNS(_XMLNS_NAMESPACE, declaration, namespace)

    def write_entity(self, entity: T) -> None:
        """Fill the document from entity with the writer function."""
        if self._writer is not None and self._document is not None:
            self._writer(entity, self._document)

    def _serialize(self) -> bytes:
        assert self._document is not None
        return self._document.toxml(encoding=_ENCODING)


class FileWriter(DocumentWriter[T]):
    """Writes the document to a file."""

    def write(self, filename: Union[str, os.PathLike]) -> bool:
        """Serialize the document into the file; returns True once written."""
        data = self._serialize()
        with open(filename, "wb") as stream:
            stream.write(data)
        return True


class BufferWriter(DocumentWriter[T]):
    """Writes the document into a buffer in memory.

    Each call to write_entity() serializes the document again and adds the
    result to the end of the buffer.
    """

    def __init__(
        self,
        ns: Optional[str],
        root: str,
        writer: Optional[WriterFunction],
        doctype: Optional[DocumentType] = None,
    ) -> None:
        super().__init__(ns, root, writer, doctype)
        self._buffer = bytearray()

    def write_entity(self, entity: T) -> None:
        """Fill the document from entity and serialize it into the buffer."""
        super().write_entity(entity)
        if self._document is not None:
            self._buffer.extend(self._serialize())

    def write(self, size: Optional[int] = None) -> bytes:
        """Return the buffered bytes.

        Raises ValueError if they do not fit in size bytes.
        """
        if size is not None and len(self._buffer) > size:
            raise ValueError(
                f"document needs {len(self._buffer)} bytes, only {size} available"
            )
        return bytes(self._buffer)

    def buffer_size(self) -> int:
        """Return the number of bytes in the buffer."""
        return len(self._buffer)