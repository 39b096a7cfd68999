"""Routine XML work: parsing documents into DOM trees, creating and saving them."""

from __future__ import annotations

import os
import xml.sax
from typing import Any, Optional, Union
from xml.dom import minidom
from xml.dom.minidom import Document, DocumentType, getDOMImplementation
from xml.sax.handler import EntityResolver, ErrorHandler

from .error_handler import XMLErrorHandler
from .resolver import NoOpResolver, SchemaResolver

_ENCODING = "UTF-8"


class _FallbackResolver(EntityResolver):
    """Asks a resolver first and falls back to the system id when it declines."""

    def __init__(self, resolver: EntityResolver) -> None:
        super().__init__()
        self._resolver = resolver

    def resolveEntity(self, public_id, system_id):
        resolved = self._resolver.resolveEntity(public_id, system_id)
        return resolved if resolved is not None else system_id


class XMLHelper:
    """Parses XML documents and creates or saves DOM documents.

    Parsing processes namespaces, drops comments, expands entity references
    and consults the entity resolver for external entities. Problems are
    reported to the error handler; once it has recorded an error, parsing
    yields no document until its errors are reset.
    """

    def __init__(
        self,
        resolver: Union[EntityResolver, Any, None] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        if resolver is None:
            resolver = SchemaResolver(NoOpResolver())
        elif not isinstance(resolver, EntityResolver):
            resolver = SchemaResolver(resolver)
        self.resolver: EntityResolver = resolver
        self.error_handler: ErrorHandler = (
            error_handler if error_handler is not None else XMLErrorHandler()
        )
        self._implementation = getDOMImplementation()
        self._initialized = True

    def __enter__(self) -> "XMLHelper":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the helper; it reports itself uninitialized afterwards."""
        self._initialized = False

    def is_initialized(self) -> bool:
        """Return True while the helper is ready for use."""
        return self._initialized

    def _has_errors(self) -> bool:
        errors = getattr(self.error_handler, "errors", None)
        return bool(errors()) if callable(errors) else False

    def create_dom(self, uri: Union[str, os.PathLike, None]) -> Optional[Document]:
        """Parse the document at uri into a DOM tree.

        Returns None for a missing uri, or when the error handler has
        recorded an error.
        """
        if uri is None:
            return None
        parser = xml.sax.make_parser()
        parser.setFeature(xml.sax.handler.feature_namespaces, True)
        parser.setFeature(xml.sax.handler.feature_external_ges, True)
        parser.setErrorHandler(self.error_handler)
        parser.setEntityResolver(_FallbackResolver(self.resolver))
        document = minidom.parse(os.fspath(uri), parser)
        if self._has_errors():
            document.unlink()
            return None
        _strip_comments(document)
        return document

    def create_document(
        self,
        root: Optional[str],
        ns: Optional[str],
        doctype: Optional[DocumentType] = None,
    ) -> Optional[Document]:
        """Create an empty document with the given root element and namespace.

        Returns None if root or ns is missing.
        """
        if root is None or ns is None:
            return None
        return self._implementation.createDocument(ns or None, root, doctype)

    def create_doctype(
        self, qualified_name: str, public_id: str, system_id: str
    ) -> DocumentType:
        """Create a document type node."""
        return self._implementation.createDocumentType(
            qualified_name, public_id, system_id
        )

    def write_dom(
        self, document: Optional[Document], filename: Union[str, os.PathLike]
    ) -> bool:
        """Write the document, pretty-printed, into a file.

        Returns True once written, False if there is no document or the
        file cannot be written.
        """
        if document is None:
            return False
        data = document.toprettyxml(indent="  ", encoding=_ENCODING)
        try:
            with open(filename, "wb") as stream:
                stream.write(data)
        except OSError:
            return False
        return True


def _strip_comments(node: Any) -> None:
    for child in list(node.childNodes):
        if child.nodeType == child.COMMENT_NODE:
            node.removeChild(child)
        else:
            _strip_comments(child)