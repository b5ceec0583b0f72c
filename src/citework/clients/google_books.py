"""Google Books search client - no API key required for light use."""

from __future__ import annotations

from typing import Any

from citework.clients.base import BaseSourceClient
from citework.models.citation import CitationSource
from citework.models.search import Pagination


class GoogleBooksClient(BaseSourceClient):
    """
    Google Books volumes search client.

    An API key raises the daily quota; it is sent only when configured.
    """

    source = CitationSource.GOOGLE_BOOKS
    no_results_message = "No books found"

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        super().__init__(timeout=timeout)
        self.api_key = api_key if api_key is not None else self.settings.google_books_api_key

    @property
    def search_url(self) -> str:
        return self.settings.google_books_url

    def build_params(self, title: str, pagination: Pagination | None) -> dict[str, Any]:
        params: dict[str, Any] = {"q": title}
        if pagination is not None:
            if pagination.limit is not None:
                params["maxResults"] = pagination.limit
            if pagination.offset is not None:
                params["startIndex"] = pagination.offset
        if self.api_key:
            params["key"] = self.api_key
        return params

    def extract_records(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        return data.get("items") or []

    def total_available(self, data: dict[str, Any]) -> int:
        return data.get("totalItems", len(data.get("items") or []))
