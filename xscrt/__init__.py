"""Runtime support for XML Schema data binding: schema value types, ID/IDREF resolution, type-driven traversal and DOM reading and writing."""

__version__ = "0.1.0"