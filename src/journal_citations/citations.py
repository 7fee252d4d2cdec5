"""Citation generation for journal articles in six bibliographic styles."""
import logging
import re
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Union

from .authors import (
    format_authors_apa,
    format_authors_bibtex,
    format_authors_chicago,
    format_authors_custom,
    format_authors_mla,
    format_authors_vancouver,
)
from .dates import format_date
from .models import ArticleRecord, VolumeRef, as_article_record
from .utils.error_handling import UnsupportedFormatError, formatting_error_handler

logger = logging.getLogger(__name__)

JOURNAL_NAME = "Advances in Medicine & Health Sciences Journal"
JOURNAL_ABBREV = "Adv Med Health Sci J"
HOUSE_JOURNAL_NAME = "Advances in Medicine and Health Sciences Journal"
PUBLISHER = "AMHSJ"
DEFAULT_ARTICLE_NUMBER = "001"

FORMAT_CUSTOM = "custom"
FORMAT_APA = "apa"
FORMAT_MLA = "mla"
FORMAT_CHICAGO = "chicago"
FORMAT_VANCOUVER = "vancouver"
FORMAT_BIBTEX = "bibtex"

ArticleInput = Union[ArticleRecord, Mapping[str, Any]]


def generate_apa_citation(article: ArticleInput) -> str:
    """Generate an APA 7th edition reference."""
    article = as_article_record(article)
    authors = format_authors_apa(article.authors)
    year = format_date(article.published_date).year
    volume = article.volume_designator

    citation = f"{authors} ({year}). {article.title}. *{JOURNAL_NAME}*"
    if volume:
        citation += f", *{volume}*"
        if article.issue:
            citation += f"({article.issue})"
    if article.pages:
        citation += f", {article.pages}"
    if article.doi:
        citation += f". https://doi.org/{article.doi}"
    return citation


def generate_mla_citation(article: ArticleInput) -> str:
    """Generate an MLA 9th edition reference."""
    article = as_article_record(article)
    authors = format_authors_mla(article.authors)
    year = format_date(article.published_date).year
    volume = article.volume_designator

    citation = f'{authors}. "{article.title}" *{JOURNAL_NAME}*'
    if volume:
        citation += f", vol. {volume}"
        if article.issue:
            citation += f", no. {article.issue}"
    citation += f", {year}"
    if article.pages:
        citation += f", pp. {article.pages}"
    if article.doi:
        citation += f". DOI: {article.doi}"
    return citation + "."


def generate_chicago_citation(article: ArticleInput) -> str:
    """Generate a Chicago 17th edition reference."""
    article = as_article_record(article)
    authors = format_authors_chicago(article.authors)
    year = format_date(article.published_date).year
    volume = article.volume_designator

    citation = f'{authors}. "{article.title}" *{JOURNAL_NAME}*'
    if volume:
        citation += f" {volume}"
        if article.issue:
            citation += f", no. {article.issue}"
    citation += f" ({year})"
    if article.pages:
        citation += f": {article.pages}"
    if article.doi:
        citation += f". https://doi.org/{article.doi}"
    return citation + "."


def generate_vancouver_citation(article: ArticleInput) -> str:
    """Generate a Vancouver (ICMJE) reference using the journal abbreviation."""
    article = as_article_record(article)
    authors = format_authors_vancouver(article.authors)
    year = format_date(article.published_date).year
    volume = article.volume_designator

    citation = f"{authors}. {article.title}. {JOURNAL_ABBREV}. {year}"
    if volume:
        citation += f";{volume}"
        if article.issue:
            citation += f"({article.issue})"
    if article.pages:
        citation += f":{article.pages}"
    if article.doi:
        citation += f". doi:{article.doi}"
    return citation + "."


def bibtex_key(article: ArticleRecord) -> str:
    """Citation key: first author's surname without whitespace, plus the year."""
    year = format_date(article.published_date).year
    if not article.authors:
        return f"article{year}"
    surname = re.sub(r"\s+", "", article.authors[0].last_name.lower())
    return f"{surname}{year}"


def generate_bibtex_citation(article: ArticleInput) -> str:
    """
    Generate a BibTeX @article entry.

    Optional fields (volume, number, pages, doi) are emitted only when the
    article has a value for them.
    """
    article = as_article_record(article)
    year = format_date(article.published_date).year
    volume = article.volume_designator

    fields = [
        ("title", article.title),
        ("author", format_authors_bibtex(article.authors)),
        ("journal", JOURNAL_NAME),
    ]
    if volume:
        fields.append(("volume", volume))
    if article.issue:
        fields.append(("number", article.issue))
    if article.pages:
        fields.append(("pages", article.pages))
    fields.append(("year", year))
    if article.doi:
        fields.append(("doi", article.doi))

    lines = [f"@article{{{bibtex_key(article)},"]
    lines.extend(f"  {name}={{{value}}}," for name, value in fields)
    lines.append(f"  publisher={{{PUBLISHER}}}")
    lines.append("}")
    return "\n".join(lines)


def house_volume(volume: Optional[VolumeRef]) -> Optional[str]:
    """
    Volume designator for the house style.

    Unlike the other styles, the house format reads ``VolumeInfo.volume``
    first and only falls back to ``number``.
    """
    if volume is None:
        return None
    if isinstance(volume, str):
        return volume or None
    return volume.volume or volume.number or None


def format_article_number(article_number: Optional[str]) -> str:
    """Left-pad an article number with zeros to three digits ('7' -> '007')."""
    return (article_number or DEFAULT_ARTICLE_NUMBER).zfill(3)


def generate_custom_citation(article: ArticleInput) -> str:
    """Generate a citation in the AMHSJ house style."""
    article = as_article_record(article)
    authors = format_authors_custom(article.authors)
    year = format_date(article.published_date).year
    volume = house_volume(article.volume)

    citation = f"{authors} ({year}). {article.title}. {HOUSE_JOURNAL_NAME}"
    if volume:
        citation += f", Volume {volume}"
    citation += f", {format_article_number(article.article_number)}"
    return citation + "."


class CitationFormat(NamedTuple):
    """A registered citation style."""
    key: str
    name: str
    description: str
    generate: Callable[[ArticleInput], str]

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "name": self.name, "description": self.description}


def _register(key: str, name: str, description: str,
              generator: Callable[[ArticleInput], str]) -> CitationFormat:
    return CitationFormat(key, name, description, formatting_error_handler("")(generator))


CITATION_FORMATS: Mapping[str, CitationFormat] = MappingProxyType({
    fmt.key: fmt for fmt in (
        _register(FORMAT_CUSTOM, "AMHSJ Format",
                  "Advances in Medicine & Health Sciences Journal", generate_custom_citation),
        _register(FORMAT_APA, "APA 7th Edition",
                  "American Psychological Association", generate_apa_citation),
        _register(FORMAT_MLA, "MLA 9th Edition",
                  "Modern Language Association", generate_mla_citation),
        _register(FORMAT_CHICAGO, "Chicago 17th Edition",
                  "Chicago Manual of Style", generate_chicago_citation),
        _register(FORMAT_VANCOUVER, "Vancouver",
                  "International Committee of Medical Journal Editors", generate_vancouver_citation),
        _register(FORMAT_BIBTEX, "BibTeX",
                  "LaTeX Bibliography Format", generate_bibtex_citation),
    )
})

FORMAT_KINDS = tuple(CITATION_FORMATS)


def get_format(kind: str) -> CitationFormat:
    """Look up a registered format by key (case-insensitive)."""
    key = str(kind or "").strip().lower()
    try:
        return CITATION_FORMATS[key]
    except KeyError:
        raise UnsupportedFormatError(kind) from None


def list_formats() -> List[Dict[str, str]]:
    """Describe the available formats in registry order, e.g. for a format selector."""
    return [fmt.to_dict() for fmt in CITATION_FORMATS.values()]


def generate_citation(article: ArticleInput, kind: str) -> str:
    """Render ``article`` in the citation style named by ``kind``."""
    fmt = get_format(kind)
    logger.debug(f"Generating {fmt.key} citation")
    return fmt.generate(article)


def generate_all(article: ArticleInput) -> Dict[str, str]:
    """Render ``article`` in every registered style."""
    if isinstance(article, Mapping):
        article = as_article_record(article)
    return {key: fmt.generate(article) for key, fmt in CITATION_FORMATS.items()}
