"""Reference formatting submodule for Citework.

Renders UnifiedCitation records as APA, MLA, Chicago, Harvard or BibTeX.

Example usage:
    from citework.references import CitationFormatter, CitationStyle, to_bibtex

    # Render one citation directly
    print(to_bibtex(citation))

    # Or bind a formatter to a style
    formatter = CitationFormatter(style=CitationStyle.MLA)
    print(formatter.format_bibliography(citations))
"""

from citework.references.formatter import (
    CitationFormatter,
    bibtex_key,
    format_authors_apa,
    format_authors_chicago,
    format_authors_harvard,
    format_authors_mla,
    format_bibliography,
    format_citation,
    to_apa,
    to_bibtex,
    to_chicago,
    to_harvard,
    to_mla,
)
from citework.references.names import format_author_last_first, last_name
from citework.references.styles import CitationStyle, StyleConfig, get_style_config

__all__ = [
    # Styles
    "CitationStyle",
    "StyleConfig",
    "get_style_config",
    # Names
    "format_author_last_first",
    "last_name",
    # Formatter
    "CitationFormatter",
    "bibtex_key",
    "format_authors_apa",
    "format_authors_chicago",
    "format_authors_harvard",
    "format_authors_mla",
    "format_bibliography",
    "format_citation",
    "to_apa",
    "to_bibtex",
    "to_chicago",
    "to_harvard",
    "to_mla",
]
