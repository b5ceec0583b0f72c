"""Clients package."""

from citework.clients.base import (
    BaseSourceClient,
    InvalidQueryError,
    NoResultsError,
    SourceClientError,
)
from citework.clients.crossref import CrossrefClient
from citework.clients.google_books import GoogleBooksClient
from citework.clients.open_library import OpenLibraryClient

__all__ = [
    "BaseSourceClient",
    "CrossrefClient",
    "GoogleBooksClient",
    "InvalidQueryError",
    "NoResultsError",
    "OpenLibraryClient",
    "SourceClientError",
]
