"""Open Library search client - free, no API key."""

from __future__ import annotations

from typing import Any

from citework.clients.base import BaseSourceClient
from citework.models.citation import CitationSource
from citework.models.search import Pagination


class OpenLibraryClient(BaseSourceClient):
    """Open Library title search client (search.json)."""

    source = CitationSource.OPEN_LIBRARY
    no_results_message = "No books found in Open Library"

    @property
    def search_url(self) -> str:
        return self.settings.open_library_search_url

    def build_params(self, title: str, pagination: Pagination | None) -> dict[str, Any]:
        params: dict[str, Any] = {"title": title}
        if pagination is not None:
            if pagination.limit is not None:
                params["limit"] = pagination.limit
            if pagination.offset is not None:
                params["offset"] = pagination.offset
        return params

    def extract_records(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        return data.get("docs") or []

    def total_available(self, data: dict[str, Any]) -> int:
        return data.get("numFound", len(data.get("docs") or []))
