"""Search orchestrator - queries Crossref, Google Books and Open Library for one title."""

from __future__ import annotations

import asyncio

from citework.clients.base import BaseSourceClient, SourceClientError
from citework.clients.crossref import CrossrefClient
from citework.clients.google_books import GoogleBooksClient
from citework.clients.open_library import OpenLibraryClient
from citework.logging import get_logger, log_warning
from citework.models.citation import CitationSource
from citework.models.search import CombinedSearchResult, Pagination, SourceSearchResult

logger = get_logger("orchestrator")

_RESULT_FIELDS = {
    CitationSource.CROSSREF: "crossref",
    CitationSource.GOOGLE_BOOKS: "google_books",
    CitationSource.OPEN_LIBRARY: "open_library",
}


class AllSourcesFailedError(SourceClientError):
    """Raised when every source failed during a combined search."""

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        super().__init__(message)
        self.errors = errors or {}


def default_clients(mailto: str | None = None) -> dict[CitationSource, BaseSourceClient]:
    """Build one client per source, using settings for anything not given."""
    return {
        CitationSource.CROSSREF: CrossrefClient(mailto=mailto),
        CitationSource.GOOGLE_BOOKS: GoogleBooksClient(),
        CitationSource.OPEN_LIBRARY: OpenLibraryClient(),
    }


async def search_source(
    source: CitationSource | str,
    title: str,
    pagination: Pagination | None = None,
    mailto: str | None = None,
    client: BaseSourceClient | None = None,
) -> SourceSearchResult:
    """
    Search a single source by title.

    Args:
        source: Source to query
        title: Title to search for
        pagination: Optional page window
        mailto: Crossref contact email (falls back to settings)
        client: Client to use instead of the default one

    Returns:
        SourceSearchResult

    Raises:
        ValueError: If the source is unknown
        SourceClientError: If the search fails or finds nothing
    """
    try:
        source = CitationSource(source)
    except ValueError:
        valid = [s.value for s in CitationSource]
        raise ValueError(f"Unknown source: {source}. Available: {valid}")

    if client is None:
        client = default_clients(mailto)[source]
    return await client.search(title, pagination)


async def search_all_sources(
    title: str,
    mailto: str | None = None,
    pagination: dict[CitationSource, Pagination] | None = None,
    clients: dict[CitationSource, BaseSourceClient] | None = None,
) -> CombinedSearchResult:
    """
    Search every source concurrently and keep whatever succeeds.

    A failing source is logged and recorded in ``errors``; it does not stop
    the others.

    Args:
        title: Title to search for
        mailto: Crossref contact email (falls back to settings)
        pagination: Optional page window per source
        clients: Clients to use instead of the defaults

    Returns:
        CombinedSearchResult with one result per successful source

    Raises:
        AllSourcesFailedError: If no source returned results
    """
    clients = clients or default_clients(mailto)
    pagination = pagination or {}
    sources = [source for source in CitationSource if source in clients]

    outcomes = await asyncio.gather(
        *(clients[source].search(title, pagination.get(source)) for source in sources),
        return_exceptions=True,
    )

    combined = CombinedSearchResult(query=title)
    for source, outcome in zip(sources, outcomes):
        if isinstance(outcome, SourceSearchResult):
            setattr(combined, _RESULT_FIELDS[source], outcome)
            continue
        if not isinstance(outcome, Exception):
            # CancelledError and friends are not source failures
            raise outcome
        log_warning(
            logger,
            f"{source.value} search",
            f"failed: [{type(outcome).__name__}] {outcome}",
            context={"title": title},
        )
        combined.errors[source.value] = str(outcome)

    if not combined.results:
        raise AllSourcesFailedError("No results found from any source", errors=combined.errors)

    logger.info(
        "Combined search for %r: %d citations from %s",
        title,
        len(combined.citations),
        ", ".join(s.value for s in combined.succeeded_sources),
    )
    return combined
