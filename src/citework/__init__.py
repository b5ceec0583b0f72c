"""Citework - bibliographic metadata lookup and citation formatting."""

from citework.adapters import from_crossref, from_google_books, from_open_library, to_unified
from citework.models.citation import CitationSource, CitationType, UnifiedCitation
from citework.orchestrator import AllSourcesFailedError, search_all_sources, search_source
from citework.references import (
    CitationFormatter,
    CitationStyle,
    format_citation,
    to_apa,
    to_bibtex,
    to_chicago,
    to_harvard,
    to_mla,
)

__version__ = "0.1.0"
__all__ = [
    "AllSourcesFailedError",
    "CitationFormatter",
    "CitationSource",
    "CitationStyle",
    "CitationType",
    "UnifiedCitation",
    "format_citation",
    "from_crossref",
    "from_google_books",
    "from_open_library",
    "search_all_sources",
    "search_source",
    "to_apa",
    "to_bibtex",
    "to_chicago",
    "to_harvard",
    "to_mla",
    "to_unified",
]
