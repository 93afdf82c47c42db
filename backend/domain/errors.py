"""
Store error classification shared by repositories and routes.
"""
from enum import Enum
from typing import Optional


class StoreErrorKind(str, Enum):
    """What went wrong with a store call."""
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"  # unique key violation
    INFRASTRUCTURE = "infrastructure"


class BookStoreError(Exception):
    """A classified failure from the book store."""

    def __init__(self, kind: StoreErrorKind, detail: str = "", cause: Optional[BaseException] = None):
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail
        self.cause = cause

    @classmethod
    def not_found(cls, isbn: str) -> "BookStoreError":
        return cls(StoreErrorKind.NOT_FOUND, f"no book with isbn {isbn!r}")

    @classmethod
    def conflict(cls, isbn: str, cause: Optional[BaseException] = None) -> "BookStoreError":
        return cls(StoreErrorKind.CONFLICT, f"duplicate isbn {isbn!r}", cause)

    @classmethod
    def infrastructure(cls, cause: BaseException) -> "BookStoreError":
        return cls(StoreErrorKind.INFRASTRUCTURE, str(cause), cause)
