"""Tests for the source adapters."""

import pytest

from citework.adapters import (
    from_crossref,
    from_google_books,
    from_open_library,
    map_crossref_type,
    parse_year,
    to_unified,
)
from citework.models.citation import CitationSource, CitationType, UnifiedCitation


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def crossref_work():
    """A Crossref work as found in message.items."""
    return {
        "indexed": {"date-time": "2023-01-15T10:00:00Z", "timestamp": 1673776800000},
        "publisher": "MIT Press",
        "isbn-type": [{"type": "electronic", "value": "978-0-262-03685-3"}],
        "abstract": "A comprehensive introduction to machine learning.",
        "DOI": "10.1162/neco_a_01199",
        "type": "journal-article",
        "created": {"date-time": "2023-01-15T10:00:00Z", "timestamp": 1673776800000},
        "source": "Crossref",
        "title": ["Deep Learning Fundamentals"],
        "author": [
            {"given": "John", "family": "Smith", "sequence": "first"},
            {"given": "Jane", "family": "Doe", "sequence": "additional"},
        ],
        "language": "en",
        "resource": {"primary": {"URL": "https://example.com/primary"}},
        "ISBN": ["978-0-262-03685-3"],
        "URL": "https://example.com/article",
    }


@pytest.fixture
def google_books_item():
    """A Google Books volume as found in items."""
    return {
        "kind": "books#volume",
        "id": "abc123",
        "volumeInfo": {
            "title": "Introduction to Algorithms",
            "authors": ["Thomas H. Cormen", "Charles E. Leiserson"],
            "publisher": "MIT Press",
            "publishedDate": "2009-07-31",
            "description": "A comprehensive textbook covering algorithms.",
            "industryIdentifiers": [
                {"type": "ISBN_13", "identifier": "9780262033848"},
                {"type": "ISBN_10", "identifier": "0262033844"},
            ],
            "pageCount": 1312,
            "language": "en",
            "infoLink": "https://books.google.com/books?id=abc123",
        },
    }


@pytest.fixture
def open_library_doc():
    """An Open Library search document as found in docs."""
    return {
        "key": "/works/OL12345W",
        "title": "The Pragmatic Programmer",
        "author_name": ["Andrew Hunt", "David Thomas"],
        "first_publish_year": 1999,
        "isbn": ["9780135957059", "0135957052"],
        "publisher": ["Addison-Wesley", "Pearson"],
        "language": ["eng", "spa"],
        "edition_count": 5,
    }


# ============================================================================
# Helpers
# ============================================================================


class TestParseYear:
    """Tests for parse_year."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2009", 2009),
            ("2009-07", 2009),
            ("2009-07-31", 2009),
            ("2023-01-15T10:00:00Z", 2023),
        ],
    )
    def test_parses_leading_year(self, value, expected):
        """Test the year is read from full and partial dates."""
        assert parse_year(value) == expected

    def test_none_and_empty(self):
        """Test missing values give no year."""
        assert parse_year(None) is None
        assert parse_year("") is None

    def test_unparseable(self):
        """Test garbage gives no year rather than an error."""
        assert parse_year("circa 1900") is None


class TestMapCrossrefType:
    """Tests for Crossref type classification."""

    @pytest.mark.parametrize(
        "work_type,expected",
        [
            ("book", CitationType.BOOK),
            ("book-chapter", CitationType.BOOK),
            ("edited-book", CitationType.BOOK),
            ("journal-article", CitationType.ARTICLE),
            ("journal", CitationType.ARTICLE),
            ("posted-content", CitationType.UNKNOWN),
            ("proceedings", CitationType.PAPER),
            ("working-paper", CitationType.PAPER),
            ("dissertation", CitationType.UNKNOWN),
        ],
    )
    def test_classification(self, work_type, expected):
        """Test each substring rule."""
        assert map_crossref_type(work_type) == expected

    def test_proceedings_article_is_article(self):
        """Test the article check runs before the proceedings check."""
        assert map_crossref_type("proceedings-article") == CitationType.ARTICLE

    def test_case_insensitive(self):
        """Test classification ignores case."""
        assert map_crossref_type("Journal-Article") == CitationType.ARTICLE

    def test_missing_type(self):
        """Test a missing type is unknown."""
        assert map_crossref_type(None) == CitationType.UNKNOWN


# ============================================================================
# Crossref
# ============================================================================


class TestFromCrossref:
    """Tests for from_crossref."""

    def test_converts_work(self, crossref_work):
        """Test a full work maps every field."""
        result = from_crossref(crossref_work)

        assert isinstance(result, UnifiedCitation)
        assert result.title == "Deep Learning Fundamentals"
        assert result.authors == ("John Smith", "Jane Doe")
        assert result.year == 2023
        assert result.publisher == "MIT Press"
        assert result.doi == "10.1162/neco_a_01199"
        assert result.isbn == ("978-0-262-03685-3",)
        assert result.url == "https://example.com/article"
        assert result.abstract == "A comprehensive introduction to machine learning."
        assert result.type == CitationType.ARTICLE
        assert result.source == CitationSource.CROSSREF
        assert result.language == "en"

    def test_missing_authors(self, crossref_work):
        """Test an absent author list gives no authors."""
        del crossref_work["author"]
        assert from_crossref(crossref_work).authors == ()

    def test_missing_title(self, crossref_work):
        """Test an absent title falls back to Untitled."""
        del crossref_work["title"]
        assert from_crossref(crossref_work).title == "Untitled"

    def test_empty_title_list(self, crossref_work):
        """Test an empty title list falls back to Untitled."""
        crossref_work["title"] = []
        assert from_crossref(crossref_work).title == "Untitled"

    def test_book_type(self, crossref_work):
        """Test book types map to book."""
        crossref_work["type"] = "book"
        assert from_crossref(crossref_work).type == CitationType.BOOK

    def test_proceedings_article_type(self, crossref_work):
        """Test proceedings-article maps to article, not paper."""
        crossref_work["type"] = "proceedings-article"
        assert from_crossref(crossref_work).type == CitationType.ARTICLE

    def test_author_with_only_family_name(self, crossref_work):
        """Test a missing given name is trimmed away."""
        crossref_work["author"] = [{"family": "Aristotle"}]
        assert from_crossref(crossref_work).authors == ("Aristotle",)

    def test_organisation_author(self, crossref_work):
        """Test organisation authors use their name."""
        crossref_work["author"] = [{"name": "WHO Collaborative Group", "sequence": "first"}]
        assert from_crossref(crossref_work).authors == ("WHO Collaborative Group",)

    def test_missing_created_gives_no_year(self, crossref_work):
        """Test the year is absent without a creation date."""
        del crossref_work["created"]
        assert from_crossref(crossref_work).year is None

    def test_year_from_timestamp(self, crossref_work):
        """Test the epoch-millisecond timestamp is used when date-time is absent."""
        crossref_work["created"] = {"timestamp": 1673776800000}
        assert from_crossref(crossref_work).year == 2023

    def test_url_falls_back_to_primary_resource(self, crossref_work):
        """Test resource.primary.URL is used when URL is absent."""
        del crossref_work["URL"]
        assert from_crossref(crossref_work).url == "https://example.com/primary"

    def test_minimal_work(self):
        """Test an empty record degrades to defaults instead of raising."""
        result = from_crossref({})
        assert result.title == "Untitled"
        assert result.authors == ()
        assert result.year is None
        assert result.isbn is None
        assert result.url is None
        assert result.type == CitationType.UNKNOWN


# ============================================================================
# Google Books
# ============================================================================


class TestFromGoogleBooks:
    """Tests for from_google_books."""

    def test_converts_item(self, google_books_item):
        """Test a full volume maps every field."""
        result = from_google_books(google_books_item)

        assert result.title == "Introduction to Algorithms"
        assert result.authors == ("Thomas H. Cormen", "Charles E. Leiserson")
        assert result.year == 2009
        assert result.publisher == "MIT Press"
        assert result.abstract == "A comprehensive textbook covering algorithms."
        assert result.url == "https://books.google.com/books?id=abc123"
        assert result.type == CitationType.BOOK
        assert result.source == CitationSource.GOOGLE_BOOKS
        assert result.language == "en"

    def test_isbn_types_discarded_order_kept(self, google_books_item):
        """Test ISBN-13 and ISBN-10 identifiers keep source order."""
        result = from_google_books(google_books_item)
        assert list(result.isbn) == ["9780262033848", "0262033844"]

    def test_missing_authors(self, google_books_item):
        """Test an absent author list gives no authors."""
        del google_books_item["volumeInfo"]["authors"]
        assert from_google_books(google_books_item).authors == ()

    def test_missing_isbn(self, google_books_item):
        """Test absent identifiers give an empty ISBN list."""
        del google_books_item["volumeInfo"]["industryIdentifiers"]
        assert from_google_books(google_books_item).isbn == ()

    def test_year_only_published_date(self, google_books_item):
        """Test a bare year is parsed."""
        google_books_item["volumeInfo"]["publishedDate"] = "1998"
        assert from_google_books(google_books_item).year == 1998

    def test_missing_published_date(self, google_books_item):
        """Test a missing date gives no year."""
        del google_books_item["volumeInfo"]["publishedDate"]
        assert from_google_books(google_books_item).year is None

    def test_always_book(self, google_books_item):
        """Test Google Books records are always books."""
        google_books_item["volumeInfo"]["printType"] = "MAGAZINE"
        assert from_google_books(google_books_item).type == CitationType.BOOK


# ============================================================================
# Open Library
# ============================================================================


class TestFromOpenLibrary:
    """Tests for from_open_library."""

    def test_converts_doc(self, open_library_doc):
        """Test a full document maps every field."""
        result = from_open_library(open_library_doc)

        assert result.title == "The Pragmatic Programmer"
        assert result.authors == ("Andrew Hunt", "David Thomas")
        assert result.year == 1999
        assert result.publisher == "Addison-Wesley"
        assert result.isbn == ("9780135957059", "0135957052")
        assert result.type == CitationType.BOOK
        assert result.source == CitationSource.OPEN_LIBRARY
        assert result.url == "https://openlibrary.org/works/OL12345W"
        assert result.language == "eng"

    def test_missing_authors(self, open_library_doc):
        """Test an absent author list gives no authors."""
        del open_library_doc["author_name"]
        assert from_open_library(open_library_doc).authors == ()

    def test_missing_publisher(self, open_library_doc):
        """Test an absent publisher list gives no publisher."""
        del open_library_doc["publisher"]
        assert from_open_library(open_library_doc).publisher is None

    def test_missing_year(self, open_library_doc):
        """Test an absent first_publish_year gives no year."""
        del open_library_doc["first_publish_year"]
        assert from_open_library(open_library_doc).year is None

    def test_missing_language(self, open_library_doc):
        """Test an absent language list gives no language."""
        del open_library_doc["language"]
        assert from_open_library(open_library_doc).language is None


# ============================================================================
# Dispatch
# ============================================================================


class TestToUnified:
    """Tests for to_unified dispatch."""

    def test_dispatch_by_enum(self, crossref_work):
        """Test dispatch with a CitationSource."""
        result = to_unified(CitationSource.CROSSREF, crossref_work)
        assert result.source == CitationSource.CROSSREF

    def test_dispatch_by_string(self, google_books_item, open_library_doc):
        """Test dispatch with the source's string value."""
        assert to_unified("googlebooks", google_books_item).source == CitationSource.GOOGLE_BOOKS
        assert to_unified("openlibrary", open_library_doc).source == CitationSource.OPEN_LIBRARY

    def test_unknown_source(self):
        """Test an unknown source is rejected."""
        with pytest.raises(ValueError) as exc_info:
            to_unified("worldcat", {})
        assert "Unknown source" in str(exc_info.value)
