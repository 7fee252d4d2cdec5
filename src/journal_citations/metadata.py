"""Scholarly indexing metadata (Highwire Press and Dublin Core) for articles."""
from typing import Dict, Optional

from .citations import ArticleInput, house_volume
from .dates import parse_date
from .models import ArticleRecord, as_article_record

METADATA_JOURNAL_TITLE = "Advances in Medical & Health Sciences Journal"
METADATA_JOURNAL_ABBREV = "AMHSJ"
METADATA_LANGUAGE = "en"
METADATA_RIGHTS = f"Copyright © {METADATA_JOURNAL_TITLE}"


def _iso_publication_date(article: ArticleRecord) -> str:
    parsed = parse_date(article.published_date)
    return parsed.isoformat() if parsed else ""


def article_identifier(article: ArticleRecord) -> str:
    """DOI when known, otherwise 'AMHSJ.{volume}.{article number}'."""
    if article.doi:
        return article.doi
    volume = house_volume(article.volume)
    if volume and article.article_number:
        return f"{METADATA_JOURNAL_ABBREV}.{volume}.{article.article_number}"
    return ""


def generate_highwire_press(article: ArticleInput) -> Dict[str, str]:
    """
    Build Highwire Press ``citation_*`` meta tags, as read by Google Scholar
    and PubMed.

    Authors are numbered from 0 in citation order, each with an optional
    ``citation_author_institution_{n}``; keywords are numbered the same way.
    """
    article = as_article_record(article)
    publication_date = _iso_publication_date(article)
    volume: Optional[str] = house_volume(article.volume)

    metadata = {
        "citation_title": article.title,
        "citation_journal_title": METADATA_JOURNAL_TITLE,
        "citation_journal_abbrev": METADATA_JOURNAL_ABBREV,
        "citation_publisher": METADATA_JOURNAL_TITLE,
        "citation_volume": volume or "",
        "citation_publication_date": publication_date,
        "citation_online_date": publication_date,
        "citation_year": publication_date[:4],
        "citation_language": METADATA_LANGUAGE,
        "citation_abstract": article.abstract or "",
    }
    if article.doi:
        metadata["citation_doi"] = article.doi
    if article.article_number:
        metadata["citation_firstpage"] = article.article_number

    for index, author in enumerate(article.authors):
        metadata[f"citation_author_{index}"] = f"{author.last_name}, {author.first_name}"
        if author.affiliation:
            metadata[f"citation_author_institution_{index}"] = author.affiliation

    for index, keyword in enumerate(article.keywords):
        metadata[f"citation_keyword_{index}"] = keyword

    return metadata


def generate_dublin_core(article: ArticleInput) -> Dict[str, str]:
    """Build Dublin Core ``DC.*`` meta tags."""
    article = as_article_record(article)
    return {
        "DC.title": article.title,
        "DC.creator": "; ".join(f"{a.last_name}, {a.first_name}" for a in article.authors),
        "DC.subject": "; ".join(article.keywords),
        "DC.description": article.abstract or "",
        "DC.publisher": METADATA_JOURNAL_TITLE,
        "DC.date": _iso_publication_date(article),
        "DC.type": "Text",
        "DC.format": "text/html",
        "DC.identifier": article_identifier(article),
        "DC.language": METADATA_LANGUAGE,
        "DC.rights": METADATA_RIGHTS,
    }
