"""Base class for all reference source clients."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any

import httpx

from citework.adapters import to_unified
from citework.config import get_settings
from citework.logging import get_logger
from citework.models.citation import CitationSource, UnifiedCitation
from citework.models.search import Pagination, SourceSearchResult

logger = get_logger("clients")


class SourceClientError(Exception):
    """Base exception for source client errors."""

    pass


class InvalidQueryError(SourceClientError):
    """Raised when required query input is empty or invalid."""

    pass


class NoResultsError(SourceClientError):
    """Raised when a source answers with zero records."""

    pass


class BaseSourceClient(ABC):
    """Abstract base class for reference API clients.

    Subclasses describe how to build query parameters and where the records
    live in the response; searching, error mapping and normalization are
    shared. Requests are issued once: no retries, no caching.
    """

    source: CitationSource
    no_results_message: str = "No results found"

    def __init__(self, timeout: float | None = None):
        self.settings = get_settings()
        self.timeout = timeout if timeout is not None else self.settings.request_timeout

    @property
    @abstractmethod
    def search_url(self) -> str:
        """Endpoint queried by search()."""
        pass

    @abstractmethod
    def build_params(self, title: str, pagination: Pagination | None) -> dict[str, Any]:
        """Build query parameters for a title search."""
        pass

    @abstractmethod
    def extract_records(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        """Return the list of raw records from a decoded response."""
        pass

    @abstractmethod
    def total_available(self, data: dict[str, Any]) -> int:
        """Return the total number of matches reported by the source."""
        pass

    def normalize(self, record: dict[str, Any]) -> UnifiedCitation:
        """Convert one raw record into a UnifiedCitation."""
        return to_unified(self.source, record)

    def validate_query(self, title: str) -> None:
        """Reject blank titles before any request is made."""
        if not title or not title.strip():
            raise InvalidQueryError(f"{self.source.value}: search title must not be empty")

    async def _request(self, params: dict[str, Any]) -> dict[str, Any]:
        """Make a GET request to the search endpoint and decode the JSON body."""
        logger.debug("GET %s params=%s", self.search_url, params)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(self.search_url, params=params)
            response.raise_for_status()
            return response.json()

    async def search(self, title: str, pagination: Pagination | None = None) -> SourceSearchResult:
        """
        Search the source by title.

        Args:
            title: Title (or free text) to search for
            pagination: Optional page window

        Returns:
            SourceSearchResult with raw records and normalized citations

        Raises:
            InvalidQueryError: If the title or other required input is blank
            NoResultsError: If the source returns zero records
            SourceClientError: On HTTP or transport failures
        """
        self.validate_query(title)
        params = self.build_params(title, pagination)

        start_time = time.time()
        try:
            data = await self._request(params)
        except httpx.HTTPStatusError as e:
            raise SourceClientError(f"{self.source.value} search failed: {e}")
        except httpx.HTTPError as e:
            raise SourceClientError(f"{self.source.value} request failed: {e}")
        except ValueError as e:
            raise SourceClientError(f"{self.source.value} returned invalid JSON: {e}")

        records = self.extract_records(data or {})
        if not records:
            raise NoResultsError(self.no_results_message)

        execution_time = int((time.time() - start_time) * 1000)
        logger.info("%s: %d records for %r", self.source.value, len(records), title)

        return SourceSearchResult(
            query=title,
            source=self.source,
            records=records,
            citations=[self.normalize(record) for record in records],
            total_available=self.total_available(data),
            raw=data,
            execution_time_ms=execution_time,
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} source={self.source.value}>"
