"""
Core domain models for the book and people services.
These are framework-agnostic and can be used across all layers.
"""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Book:
    """
    A book in the store, keyed by ISBN.

    ``price`` is kept as the client sent it; no numeric parsing happens.
    An empty ``isbn`` means the record carries no key and cannot be found.
    """
    isbn: str = ""
    title: str = ""
    authors: List[str] = field(default_factory=list)
    price: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isbn": self.isbn,
            "title": self.title,
            "authors": list(self.authors),
            "price": self.price,
        }


@dataclass
class Address:
    city: str = ""
    country: str = ""


@dataclass
class Person:
    """A person held only in memory by the people service."""
    id: str = ""
    firstname: str = ""
    lastname: str = ""
    address: Optional[Address] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
