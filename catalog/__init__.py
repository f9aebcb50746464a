"""Read-only racing and sports catalogs behind an HTTP gateway."""

__version__ = "0.1.0"
