"""An error handler for SAX parsing that reports problems and remembers errors."""

from __future__ import annotations

import sys
from typing import Optional, TextIO
from xml.sax import SAXParseException
from xml.sax.handler import ErrorHandler


class XMLErrorHandler(ErrorHandler):
    """Prints each problem as 'Kind: file:line:column - message'.

    Errors and fatal errors set a flag that stays set until reset_errors().
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__()
        self._stream = stream
        self._errors = False

    def _report(self, kind: str, exception: SAXParseException) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        system_id = exception.getSystemId() or ""
        print(
            f"{kind}: {system_id}:{exception.getLineNumber()}:"
            f"{exception.getColumnNumber()} - {exception.getMessage()}",
            file=stream,
        )

    def warning(self, exception: SAXParseException) -> None:
        """Report a warning."""
        self._report("Warning", exception)

    def error(self, exception: SAXParseException) -> None:
        """Report a recoverable error and remember it."""
        self._report("Error", exception)
        self._errors = True

    def fatalError(self, exception: SAXParseException) -> None:
        """Report a fatal error and remember it."""
        self._report("Fatal Error", exception)
        self._errors = True

    def reset_errors(self) -> None:
        """Forget earlier errors."""
        self._errors = False

    def errors(self) -> bool:
        """Return True if an error was reported since the last reset."""
        return self._errors