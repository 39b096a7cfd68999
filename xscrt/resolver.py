"""Entity resolvers that locate schema documents by path, search list or URL."""

from __future__ import annotations

import os
from typing import Callable, Iterable, List, Optional, Tuple
from urllib.parse import urljoin
from xml.sax.handler import EntityResolver
from xml.sax.xmlreader import InputSource

ResolverFunction = Callable[[Optional[str], Optional[str]], Optional[InputSource]]


def _input_source(system_id: str) -> InputSource:
    return InputSource(system_id)


class SchemaResolver(EntityResolver):
    """A SAX entity resolver that delegates to a resolver callable."""

    def __init__(self, resolver: ResolverFunction) -> None:
        super().__init__()
        self._resolver = resolver

    def resolveEntity(self, public_id, system_id):
        """Return whatever the wrapped resolver returns for the entity."""
        return self._resolver(public_id, system_id)


class NoOpResolver:
    """A resolver that never resolves anything."""

    def __init__(self) -> None:
        self.last_declined: Optional[Tuple[Optional[str], Optional[str]]] = None

    def __call__(self, public_id: Optional[str], system_id: Optional[str]) -> None:
        """Decline the entity, remembering which one it was."""
        self.last_declined = (public_id, system_id)
        return None


class BasicResolver:
    """Resolves every system id by putting a fixed path in front of it."""

    def __init__(self, path: str = "") -> None:
        self._path = path

    def set_path(self, path: str) -> None:
        """Change the path put in front of system ids."""
        self._path = path

    def __call__(
        self, public_id: Optional[str], system_id: Optional[str]
    ) -> InputSource:
        return _input_source(self._path + (system_id or ""))


class PathResolver:
    """Resolves a system id against the first search path where the file exists."""

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: List[str] = list(paths)

    def insert(self, path: str) -> None:
        """Add a search path at the end of the list."""
        self._paths.append(path)

    @property
    def paths(self) -> List[str]:
        """The search paths, in order."""
        return list(self._paths)

    @staticmethod
    def _readable(candidate: str) -> bool:
        try:
            with open(candidate, "rb"):
                return True
        except OSError:
            return False

    def __call__(
        self, public_id: Optional[str], system_id: Optional[str]
    ) -> Optional[InputSource]:
        tail = system_id or ""
        for path in self._paths:
            if path and self._readable(path + tail):
                return _input_source(path + tail)
        return None


class EnvironmentResolver(PathResolver):
    """A path resolver whose search paths start at environment variables."""

    def __init__(self, variable: str = "", relpath: str = "./") -> None:
        super().__init__()
        self.insert(variable, relpath)

    def insert(self, variable: str, relpath: str) -> None:  # type: ignore[override]
        """Add the variable's value followed by relpath as a search path."""
        base = os.environ.get(variable, "") if variable else ""
        PathResolver.insert(self, base + relpath)


class URLResolver:
    """Resolves system ids relative to a base URL."""

    def __init__(self, url: str) -> None:
        self._url = url

    def __call__(
        self, public_id: Optional[str], system_id: Optional[str]
    ) -> InputSource:
        return _input_source(urljoin(self._url, system_id or ""))