"""Citation style definitions for reference formatting."""

from dataclasses import dataclass
from enum import Enum


class CitationStyle(str, Enum):
    """Supported citation styles."""

    APA = "apa"
    MLA = "mla"
    CHICAGO = "chicago"
    HARVARD = "harvard"
    BIBTEX = "bibtex"


@dataclass(frozen=True)
class StyleConfig:
    """Configuration for a citation style.

    Attributes:
        name: Human-readable style name
        style: CitationStyle enum value
        unknown_author: Text used in place of an empty author list
        no_date: Text used in the year position when the year is missing
        quote_non_book_titles: Wrap non-book titles in double quotes
        entry_separator: Separator between entries of a bibliography
    """

    name: str
    style: CitationStyle
    unknown_author: str
    no_date: str
    quote_non_book_titles: bool
    entry_separator: str = "\n"


# Pre-defined style configurations
STYLE_CONFIGS = {
    CitationStyle.APA: StyleConfig(
        name="APA",
        style=CitationStyle.APA,
        unknown_author="Unknown Author",
        no_date="(n.d.)",
        quote_non_book_titles=False,
    ),
    CitationStyle.MLA: StyleConfig(
        name="MLA",
        style=CitationStyle.MLA,
        unknown_author="Unknown Author",
        no_date="",
        quote_non_book_titles=True,
    ),
    CitationStyle.CHICAGO: StyleConfig(
        name="Chicago",
        style=CitationStyle.CHICAGO,
        unknown_author="Unknown Author",
        no_date="n.d.",
        quote_non_book_titles=True,
    ),
    CitationStyle.HARVARD: StyleConfig(
        name="Harvard",
        style=CitationStyle.HARVARD,
        unknown_author="Unknown Author",
        no_date="n.d.",
        quote_non_book_titles=False,
    ),
    CitationStyle.BIBTEX: StyleConfig(
        name="BibTeX",
        style=CitationStyle.BIBTEX,
        unknown_author="unknown",
        no_date="nodate",
        quote_non_book_titles=False,
        entry_separator="\n\n",
    ),
}


def get_style_config(style: CitationStyle | str) -> StyleConfig:
    """Get the configuration for a citation style.

    Args:
        style: The citation style, as enum or its string value ("apa", "bibtex", ...)

    Returns:
        StyleConfig for the requested style

    Raises:
        ValueError: If the style is not supported
    """
    if isinstance(style, str):
        try:
            style = CitationStyle(style.lower())
        except ValueError:
            valid = [s.value for s in CitationStyle]
            raise ValueError(f"Invalid citation style: {style}. Valid styles: {valid}")
    return STYLE_CONFIGS[style]
