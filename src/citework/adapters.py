"""Source adapters - map raw Crossref, Google Books and Open Library records to UnifiedCitation.

Every adapter is a pure function over the decoded JSON record. Missing
optional data degrades to a default (empty tuple, None, "Untitled");
adapters never raise for it.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from citework.models.citation import CitationSource, CitationType, UnifiedCitation

UNTITLED = "Untitled"
OPEN_LIBRARY_BASE_URL = "https://openlibrary.org"

_YEAR_RE = re.compile(r"^\s*(\d{4})")


# ── Helpers ──────────────────────────────────────────────────────────


def parse_year(value: str | None) -> int | None:
    """Extract the calendar year from a date string.

    Handles ISO timestamps ("2023-01-15T10:00:00Z") and the partial dates
    Google Books returns ("2009", "2009-07", "2009-07-31").
    Returns None if absent or unparseable.
    """
    if not value:
        return None
    match = _YEAR_RE.match(value)
    if not match:
        return None
    return int(match.group(1))


def map_crossref_type(work_type: str | None) -> CitationType:
    """Classify a Crossref work type by substring.

    Checks run in a fixed order: "book", then "journal"/"article", then
    "proceedings"/"paper". A "proceedings-article" is therefore an article,
    not a paper.
    """
    lowered = (work_type or "").lower()
    if "book" in lowered:
        return CitationType.BOOK
    if "journal" in lowered or "article" in lowered:
        return CitationType.ARTICLE
    if "proceedings" in lowered or "paper" in lowered:
        return CitationType.PAPER
    return CitationType.UNKNOWN


def _first(values: list[Any] | None) -> Any | None:
    return values[0] if values else None


def _crossref_year(created: dict[str, Any] | None) -> int | None:
    if not created:
        return None
    year = parse_year(created.get("date-time"))
    if year is not None:
        return year
    timestamp = created.get("timestamp")
    if timestamp is None:
        return None
    # Crossref timestamps are epoch milliseconds
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc).year


def _crossref_author_name(author: dict[str, Any]) -> str:
    given = author.get("given") or ""
    family = author.get("family") or ""
    name = f"{given} {family}".strip()
    # Organisation authors carry only a "name"
    return name or (author.get("name") or "").strip()


# ── Adapters ─────────────────────────────────────────────────────────


def from_crossref(work: dict[str, Any]) -> UnifiedCitation:
    """Convert a Crossref work (an item of message.items) into a UnifiedCitation."""
    authors = []
    for author in work.get("author") or []:
        name = _crossref_author_name(author)
        if name:
            authors.append(name)

    resource = work.get("resource") or {}
    primary = resource.get("primary") or {}

    return UnifiedCitation(
        title=_first(work.get("title")) or UNTITLED,
        authors=tuple(authors),
        year=_crossref_year(work.get("created")),
        publisher=work.get("publisher"),
        doi=work.get("DOI"),
        isbn=work.get("ISBN"),
        url=work.get("URL") or primary.get("URL"),
        abstract=work.get("abstract"),
        type=map_crossref_type(work.get("type")),
        source=CitationSource.CROSSREF,
        language=work.get("language"),
    )


def from_google_books(item: dict[str, Any]) -> UnifiedCitation:
    """Convert a Google Books volume (an item of items) into a UnifiedCitation.

    ISBN-10 and ISBN-13 identifiers are kept in source order; their type is dropped.
    """
    volume = item.get("volumeInfo") or {}

    isbn = [
        identifier["identifier"]
        for identifier in volume.get("industryIdentifiers") or []
        if identifier.get("identifier")
    ]

    return UnifiedCitation(
        title=volume.get("title") or UNTITLED,
        authors=tuple(volume.get("authors") or ()),
        year=parse_year(volume.get("publishedDate")),
        publisher=volume.get("publisher"),
        isbn=tuple(isbn),
        url=volume.get("infoLink"),
        abstract=volume.get("description"),
        type=CitationType.BOOK,
        source=CitationSource.GOOGLE_BOOKS,
        language=volume.get("language"),
    )


def from_open_library(doc: dict[str, Any]) -> UnifiedCitation:
    """Convert an Open Library search document (an item of docs) into a UnifiedCitation."""
    key = doc.get("key")

    return UnifiedCitation(
        title=doc.get("title") or UNTITLED,
        authors=tuple(doc.get("author_name") or ()),
        year=doc.get("first_publish_year"),
        publisher=_first(doc.get("publisher")),
        isbn=doc.get("isbn"),
        url=f"{OPEN_LIBRARY_BASE_URL}{key}" if key else None,
        type=CitationType.BOOK,
        source=CitationSource.OPEN_LIBRARY,
        language=_first(doc.get("language")),
    )


# ── Dispatch ─────────────────────────────────────────────────────────


ADAPTERS: dict[CitationSource, Callable[[dict[str, Any]], UnifiedCitation]] = {
    CitationSource.CROSSREF: from_crossref,
    CitationSource.GOOGLE_BOOKS: from_google_books,
    CitationSource.OPEN_LIBRARY: from_open_library,
}


def to_unified(source: CitationSource | str, record: dict[str, Any]) -> UnifiedCitation:
    """Normalize a raw record from the given source.

    Raises:
        ValueError: If the source is not one of the supported reference APIs
    """
    try:
        source = CitationSource(source)
    except ValueError:
        valid = [s.value for s in CitationSource]
        raise ValueError(f"Unknown source: {source}. Available: {valid}")
    return ADAPTERS[source](record)
