"""Citation formatter for various academic styles.

Supports APA, MLA, Chicago, Harvard and BibTeX. Each renderer is a pure
function of a UnifiedCitation. Book titles are wrapped in <i>...</i>;
other titles are plain or quoted depending on the style.
"""

from collections.abc import Callable, Iterable

from citework.models.citation import UnifiedCitation
from citework.references.names import format_author_last_first, last_name
from citework.references.styles import CitationStyle, StyleConfig, get_style_config

_APA = get_style_config(CitationStyle.APA)
_MLA = get_style_config(CitationStyle.MLA)
_CHICAGO = get_style_config(CitationStyle.CHICAGO)
_HARVARD = get_style_config(CitationStyle.HARVARD)
_BIBTEX = get_style_config(CitationStyle.BIBTEX)


def _format_title(citation: UnifiedCitation, config: StyleConfig) -> str:
    if citation.is_book:
        return f"<i>{citation.title}</i>"
    if config.quote_non_book_titles:
        return f'"{citation.title}"'
    return citation.title


# ── Author Lists ─────────────────────────────────────────────────────


def format_authors_apa(authors: tuple[str, ...] | list[str]) -> str:
    """Format authors list for APA style.

    Rules:
    - 1 author: Last, First
    - 2 authors: Last, First & Last, First
    - 3+ authors: all listed, ", &" before the last
    """
    if not authors:
        return _APA.unknown_author

    if len(authors) == 1:
        return format_author_last_first(authors[0])

    if len(authors) == 2:
        return (
            f"{format_author_last_first(authors[0])} "
            f"& {format_author_last_first(authors[1])}"
        )

    formatted = [format_author_last_first(a) for a in authors[:-1]]
    last = format_author_last_first(authors[-1])
    return ", ".join(formatted) + f", & {last}"


def format_authors_mla(authors: tuple[str, ...] | list[str]) -> str:
    """Format authors list for MLA style.

    The second of two authors keeps its original "First Last" order.
    Three or more authors collapse to the first author plus "et al".
    """
    if not authors:
        return _MLA.unknown_author

    if len(authors) == 1:
        return format_author_last_first(authors[0])

    if len(authors) == 2:
        return f"{format_author_last_first(authors[0])}, and {authors[1]}"

    return f"{format_author_last_first(authors[0])}, et al"


def format_authors_chicago(authors: tuple[str, ...] | list[str]) -> str:
    """Format authors list for Chicago style.

    Format: Last, First, Last, First, and First Last
    Only the final author keeps "First Last" order.
    """
    if not authors:
        return _CHICAGO.unknown_author

    if len(authors) == 1:
        return format_author_last_first(authors[0])

    if len(authors) == 2:
        return f"{format_author_last_first(authors[0])} and {authors[1]}"

    formatted = [format_author_last_first(a) for a in authors[:-1]]
    return ", ".join(formatted) + f", and {authors[-1]}"


def format_authors_harvard(authors: tuple[str, ...] | list[str]) -> str:
    """Format authors list for Harvard style.

    Format: Last, First and Last, First; 3+ authors: Last, First et al.
    """
    if not authors:
        return _HARVARD.unknown_author

    if len(authors) == 1:
        return format_author_last_first(authors[0])

    if len(authors) == 2:
        return (
            f"{format_author_last_first(authors[0])} "
            f"and {format_author_last_first(authors[1])}"
        )

    return f"{format_author_last_first(authors[0])} et al."


# ── Styles ───────────────────────────────────────────────────────────


def to_apa(citation: UnifiedCitation) -> str:
    """Format citation in APA style.

    Format:
    Last, First (Year). Title. Publisher. https://doi.org/xxxxx
    The DOI link is preferred over the URL when both are present.
    """
    authors = format_authors_apa(citation.authors)
    year = f"({citation.year})" if citation.year else _APA.no_date
    title = _format_title(citation, _APA)

    result = f"{authors} {year}. {title}."

    if citation.publisher:
        result += f" {citation.publisher}."

    if citation.doi:
        result += f" https://doi.org/{citation.doi}"
    elif citation.url:
        result += f" {citation.url}"

    return result


def to_mla(citation: UnifiedCitation) -> str:
    """Format citation in MLA style.

    Format:
    Last, First. "Title". Publisher, Year. URL.
    The publisher/year block always ends with a period, even when empty.
    """
    authors = format_authors_mla(citation.authors)
    title = _format_title(citation, _MLA)

    result = f"{authors}. {title}."

    if citation.publisher:
        result += f" {citation.publisher}"

    if citation.year:
        result += f", {citation.year}"

    result += "."

    if citation.url:
        result += f" {citation.url}."

    return result


def to_chicago(citation: UnifiedCitation) -> str:
    """Format citation in Chicago (author-date) style.

    Format:
    Last, First and First Last. Year. "Title". Publisher. https://doi.org/xxxxx.
    """
    authors = format_authors_chicago(citation.authors)
    year = citation.year or _CHICAGO.no_date
    title = _format_title(citation, _CHICAGO)

    result = f"{authors}. {year}. {title}."

    if citation.publisher:
        result += f" {citation.publisher}."

    if citation.doi:
        result += f" https://doi.org/{citation.doi}."
    elif citation.url:
        result += f" {citation.url}."

    return result


def to_harvard(citation: UnifiedCitation) -> str:
    """Format citation in Harvard style.

    Format:
    Last, First and Last, First (Year) Title. Publisher. Available at: URL
    DOIs are not rendered; the URL is appended verbatim with no closing period.
    """
    authors = format_authors_harvard(citation.authors)
    year = citation.year or _HARVARD.no_date
    title = _format_title(citation, _HARVARD)

    result = f"{authors} ({year}) {title}."

    if citation.publisher:
        result += f" {citation.publisher}."

    if citation.url:
        result += f" Available at: {citation.url}"

    return result


def bibtex_key(citation: UnifiedCitation) -> str:
    """Build a BibTeX key: first author's family name + year + first title word."""
    author = (last_name(citation.first_author or "") or _BIBTEX.unknown_author).lower()
    year = citation.year or _BIBTEX.no_date
    title_words = citation.title.split()
    title_word = (title_words[0] if title_words else "untitled").lower()
    return f"{author}{year}{title_word}"


def to_bibtex(citation: UnifiedCitation) -> str:
    """Format citation as a BibTeX entry.

    Books become @book, everything else @article. Fields are emitted in a
    fixed order (title, author, year, publisher, doi, isbn, url) and absent
    fields are omitted. Only the first ISBN is written.
    """
    entry_type = "book" if citation.is_book else "article"

    fields: list[tuple[str, object]] = [("title", citation.title)]

    if citation.authors:
        fields.append(("author", " and ".join(citation.authors)))

    if citation.year:
        fields.append(("year", citation.year))

    if citation.publisher:
        fields.append(("publisher", citation.publisher))

    if citation.doi:
        fields.append(("doi", citation.doi))

    if citation.isbn:
        fields.append(("isbn", citation.isbn[0]))

    if citation.url:
        fields.append(("url", citation.url))

    lines = [f"@{entry_type}{{{bibtex_key(citation)},"]
    lines.extend(f"  {name}={{{value}}}," for name, value in fields)
    lines.append("}")
    return "\n".join(lines)


# ── Dispatch ─────────────────────────────────────────────────────────


RENDERERS: dict[CitationStyle, Callable[[UnifiedCitation], str]] = {
    CitationStyle.APA: to_apa,
    CitationStyle.MLA: to_mla,
    CitationStyle.CHICAGO: to_chicago,
    CitationStyle.HARVARD: to_harvard,
    CitationStyle.BIBTEX: to_bibtex,
}


def format_citation(citation: UnifiedCitation, style: CitationStyle | str) -> str:
    """Render one citation in the given style.

    Raises:
        ValueError: If the style is not supported
    """
    config = get_style_config(style)
    return RENDERERS[config.style](citation)


def format_bibliography(
    citations: Iterable[UnifiedCitation], style: CitationStyle | str
) -> str:
    """Render several citations, one entry per line (blank line between BibTeX entries)."""
    config = get_style_config(style)
    render = RENDERERS[config.style]
    return config.entry_separator.join(render(citation) for citation in citations)


class CitationFormatter:
    """Formats citations in one configured style.

    Default style is APA.
    """

    def __init__(self, style: CitationStyle | str = CitationStyle.APA):
        """Initialize the citation formatter.

        Args:
            style: Citation style to use (default: APA)
        """
        self.config = get_style_config(style)
        self.style = self.config.style

    def format_citation(self, citation: UnifiedCitation) -> str:
        """Format a citation as a full reference.

        Args:
            citation: Citation to format

        Returns:
            Formatted citation string
        """
        return RENDERERS[self.style](citation)

    def format_bibliography(self, citations: Iterable[UnifiedCitation]) -> str:
        """Format several citations as a reference list."""
        return format_bibliography(citations, self.style)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} style={self.style.value}>"
