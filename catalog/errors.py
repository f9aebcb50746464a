"""Error taxonomy shared by repositories, services and the gateway.

Store failures are not wrapped: sqlite3.Error reaches the caller as raised.
"""
from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog errors."""


class InvalidOrderByError(CatalogError, ValueError):
    """Malformed sort directive; raised before the store is touched."""


class NotFoundError(CatalogError, LookupError):
    def __init__(self, kind: str, entity_id: int):
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class ScanError(CatalogError):
    """A result row could not be mapped to a domain object."""


class NotInitializedError(CatalogError):
    def __init__(self, repo: str):
        super().__init__(f"{repo} repository is not initialised")
        self.repo = repo
