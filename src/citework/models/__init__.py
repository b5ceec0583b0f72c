"""Models package."""

from citework.models.citation import CitationSource, CitationType, UnifiedCitation
from citework.models.search import CombinedSearchResult, Pagination, SourceSearchResult

__all__ = [
    "CitationSource",
    "CitationType",
    "CombinedSearchResult",
    "Pagination",
    "SourceSearchResult",
    "UnifiedCitation",
]
