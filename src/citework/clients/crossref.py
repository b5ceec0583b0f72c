"""Crossref search client - free, identified requests go to the polite pool."""

from __future__ import annotations

from typing import Any

from citework.clients.base import BaseSourceClient, InvalidQueryError
from citework.models.citation import CitationSource
from citework.models.search import Pagination


class CrossrefClient(BaseSourceClient):
    """
    Crossref works search client.

    Crossref asks callers to identify themselves with a contact email
    (the "mailto" parameter); this client refuses to search without one.
    """

    source = CitationSource.CROSSREF
    no_results_message = "No reference found"

    def __init__(self, mailto: str | None = None, timeout: float | None = None):
        super().__init__(timeout=timeout)
        self.mailto = mailto if mailto is not None else self.settings.crossref_email

    @property
    def search_url(self) -> str:
        return self.settings.crossref_url

    def validate_query(self, title: str) -> None:
        if not self.mailto or not self.mailto.strip():
            raise InvalidQueryError(
                "Request author email is required. Be polite to CrossRef API by "
                "providing your email and tracking your usage."
            )
        super().validate_query(title)

    def build_params(self, title: str, pagination: Pagination | None) -> dict[str, Any]:
        params: dict[str, Any] = {"query": title}
        if pagination is not None:
            if pagination.limit is not None:
                params["rows"] = pagination.limit
            if pagination.offset is not None:
                params["offset"] = pagination.offset
        params["mailto"] = self.mailto
        return params

    def extract_records(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        message = data.get("message") or {}
        return message.get("items") or []

    def total_available(self, data: dict[str, Any]) -> int:
        message = data.get("message") or {}
        return message.get("total-results", len(message.get("items") or []))
