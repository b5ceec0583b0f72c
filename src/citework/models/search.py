"""Data models for source searches."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from citework.models.citation import CitationSource, UnifiedCitation


@dataclass
class Pagination:
    """Page window for a source search.

    Each client maps these onto its own parameter names
    (Crossref rows/offset, Google Books maxResults/startIndex,
    Open Library limit/offset). Unset values are not sent.
    """

    limit: int | None = None
    offset: int | None = None


@dataclass
class SourceSearchResult:
    """Result from a single source search."""

    query: str
    source: CitationSource
    records: list[dict[str, Any]]  # Raw source records, as returned by the API
    citations: list[UnifiedCitation]
    total_available: int  # Total matches reported by the source (may exceed records)
    raw: dict[str, Any] = field(default_factory=dict)
    execution_time_ms: int = 0

    @property
    def count(self) -> int:
        return len(self.records)


@dataclass
class CombinedSearchResult:
    """Result of searching every source for one title.

    Sources that failed have no result and an entry in ``errors``.
    """

    query: str
    crossref: SourceSearchResult | None = None
    google_books: SourceSearchResult | None = None
    open_library: SourceSearchResult | None = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def results(self) -> list[SourceSearchResult]:
        """Successful results in Crossref, Google Books, Open Library order."""
        return [
            result
            for result in (self.crossref, self.google_books, self.open_library)
            if result is not None
        ]

    @property
    def citations(self) -> list[UnifiedCitation]:
        citations: list[UnifiedCitation] = []
        for result in self.results:
            citations.extend(result.citations)
        return citations

    @property
    def succeeded_sources(self) -> list[CitationSource]:
        return [result.source for result in self.results]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "query": self.query,
            "sources": {
                result.source.value: {
                    "count": result.count,
                    "total_available": result.total_available,
                    "execution_time_ms": result.execution_time_ms,
                }
                for result in self.results
            },
            "errors": dict(self.errors),
            "citations": [citation.to_dict() for citation in self.citations],
        }
