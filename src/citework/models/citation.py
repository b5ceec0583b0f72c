"""Data model for the unified citation record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CitationSource(str, Enum):
    """Reference API a citation was normalized from."""

    CROSSREF = "crossref"
    GOOGLE_BOOKS = "googlebooks"
    OPEN_LIBRARY = "openlibrary"


class CitationType(str, Enum):
    """Kind of work a citation describes."""

    BOOK = "book"
    ARTICLE = "article"
    PAPER = "paper"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class UnifiedCitation:
    """Normalized citation built by a source adapter and read by the renderers.

    Authors are full names in "Given Family" order, kept in source order.
    A missing year means "no date"; renderers substitute their own placeholder.
    """

    title: str
    source: CitationSource
    authors: tuple[str, ...] = ()
    year: int | None = None
    publisher: str | None = None
    doi: str | None = None
    isbn: tuple[str, ...] | None = None
    url: str | None = None
    abstract: str | None = None
    type: CitationType = CitationType.UNKNOWN
    language: str | None = None

    def __post_init__(self) -> None:
        # Accept lists and plain strings from callers, store tuples and enums
        object.__setattr__(self, "authors", tuple(self.authors))
        if self.isbn is not None:
            object.__setattr__(self, "isbn", tuple(self.isbn))
        object.__setattr__(self, "type", CitationType(self.type))
        object.__setattr__(self, "source", CitationSource(self.source))

    @property
    def is_book(self) -> bool:
        return self.type == CitationType.BOOK

    @property
    def first_author(self) -> str | None:
        return self.authors[0] if self.authors else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "title": self.title,
            "authors": list(self.authors),
            "year": self.year,
            "publisher": self.publisher,
            "doi": self.doi,
            "isbn": list(self.isbn) if self.isbn is not None else None,
            "url": self.url,
            "abstract": self.abstract,
            "type": self.type.value,
            "source": self.source.value,
            "language": self.language,
        }
