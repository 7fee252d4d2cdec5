"""Article data models used by the citation formatters."""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .dates import parse_date


def _text(value: Any) -> Optional[str]:
    """Coerce a scalar API value to a string, keeping None as None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present key (camelCase or snake_case)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class Author:
    """Author of an article, in citation order."""
    first_name: str = ""
    last_name: str = ""
    title: Optional[str] = None
    affiliation: Optional[str] = None

    def __str__(self):
        return self.full_name

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Author':
        """Create an Author from a camelCase or snake_case mapping."""
        return cls(
            first_name=_text(_pick(data, "firstName", "first_name")) or "",
            last_name=_text(_pick(data, "lastName", "last_name")) or "",
            title=_text(data.get("title")),
            affiliation=_text(data.get("affiliation")),
        )


@dataclass(frozen=True)
class VolumeInfo:
    """Structured volume designator as returned by the journal API."""
    number: Optional[str] = None
    volume: Optional[str] = None


VolumeRef = Union[str, VolumeInfo]


def resolve_volume(volume: Optional[VolumeRef]) -> Optional[str]:
    """
    Normalise a volume reference to its designator string.

    A plain string is used directly. For a VolumeInfo the ``number`` field
    wins over ``volume``; empty strings count as absent.
    """
    if volume is None:
        return None
    if isinstance(volume, str):
        return volume or None
    return volume.number or volume.volume or None


def _volume_from_value(value: Any) -> Optional[VolumeRef]:
    if value is None or isinstance(value, VolumeInfo):
        return value
    if isinstance(value, Mapping):
        return VolumeInfo(
            number=_text(value.get("number")),
            volume=_text(value.get("volume")),
        )
    return _text(value)


def _authors_from_value(value: Any) -> Tuple[Author, ...]:
    # Anything that is not a list of authors degrades to "no authors"
    if not isinstance(value, (list, tuple)):
        return ()
    authors = []
    for item in value:
        if isinstance(item, Author):
            authors.append(item)
        elif isinstance(item, Mapping):
            authors.append(Author.from_dict(item))
    return tuple(authors)


def _keywords_from_value(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(k) for k in value if k is not None and str(k).strip())


def _iso_date(value: Any) -> Optional[str]:
    """Reduce an API date value to YYYY-MM-DD, or None if it does not parse."""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else None


def _pages_from_value(value: Any) -> Optional[str]:
    if isinstance(value, Mapping):
        start = _text(value.get("start"))
        end = _text(value.get("end"))
        if start and end and start != end:
            return f"{start}-{end}"
        return start or end
    return _text(value) or None


@dataclass(frozen=True)
class ArticleRecord:
    """A journal article as consumed by every citation style."""
    title: str = ""
    authors: Tuple[Author, ...] = ()
    published_date: Optional[str] = None
    doi: Optional[str] = None
    volume: Optional[VolumeRef] = None
    issue: Optional[str] = None
    pages: Optional[str] = None
    article_number: Optional[str] = None
    url: Optional[str] = None
    abstract: Optional[str] = None
    keywords: Tuple[str, ...] = ()

    @property
    def volume_designator(self) -> Optional[str]:
        return resolve_volume(self.volume)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary, dropping empty fields."""
        data = asdict(self)
        result: Dict[str, Any] = {
            "title": data["title"],
            "authors": [
                {
                    "firstName": a["first_name"],
                    "lastName": a["last_name"],
                    **({"title": a["title"]} if a["title"] else {}),
                    **({"affiliation": a["affiliation"]} if a["affiliation"] else {}),
                }
                for a in data["authors"]
            ],
            "publishedDate": data["published_date"],
            "doi": data["doi"],
            "volume": data["volume"],
            "issue": data["issue"],
            "pages": data["pages"],
            "articleNumber": data["article_number"],
            "url": data["url"],
            "abstract": data["abstract"],
            "keywords": list(data["keywords"]) or None,
        }
        return {k: v for k, v in result.items() if v is not None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ArticleRecord':
        """
        Create an ArticleRecord from a citation-shaped mapping.

        Accepts the camelCase keys used by the journal front end as well as
        snake_case. Malformed values are coerced rather than rejected:
        a non-list ``authors`` becomes an empty tuple and numbers become strings.
        """
        return cls(
            title=_text(data.get("title")) or "",
            authors=_authors_from_value(data.get("authors")),
            published_date=_text(_pick(data, "publishedDate", "published_date")),
            doi=_text(data.get("doi")),
            volume=_volume_from_value(data.get("volume")),
            issue=_text(data.get("issue")),
            pages=_text(data.get("pages")),
            article_number=_text(_pick(data, "articleNumber", "article_number")),
            url=_text(data.get("url")),
            abstract=_text(data.get("abstract")),
            keywords=_keywords_from_value(data.get("keywords")),
        )

    @classmethod
    def from_api_article(cls, payload: Mapping[str, Any]) -> 'ArticleRecord':
        """
        Convert an article returned by the journal REST API.

        The API returns pages as ``{start, end}``, dates as ISO timestamps and
        the volume as either a populated volume document (``{"volume": 4, ...}``)
        or an unpopulated document id. Only the document carries a designator;
        a bare id is dropped.
        """
        volume = payload.get("volume")
        if isinstance(volume, Mapping):
            designator = _text(_pick(volume, "volume", "number"))
            volume_ref: Optional[VolumeRef] = (
                VolumeInfo(number=designator, volume=designator) if designator else None
            )
        else:
            volume_ref = None

        doi = _text(payload.get("doi")) or None
        return cls(
            title=_text(payload.get("title")) or "",
            authors=_authors_from_value(payload.get("authors")),
            published_date=_iso_date(payload.get("publishedDate")),
            doi=doi,
            volume=volume_ref,
            issue=_text(payload.get("issue")) or None,
            pages=_pages_from_value(payload.get("pages")),
            article_number=_text(payload.get("articleNumber")) or None,
            url=f"https://doi.org/{doi}" if doi else None,
            abstract=_text(payload.get("abstract")) or None,
            keywords=_keywords_from_value(payload.get("keywords")),
        )


def as_article_record(article: Union[ArticleRecord, Mapping[str, Any]]) -> ArticleRecord:
    """Accept either an ArticleRecord or a mapping in the record's shape."""
    if isinstance(article, ArticleRecord):
        return article
    if isinstance(article, Mapping):
        return ArticleRecord.from_dict(article)
    raise TypeError(f"Expected ArticleRecord or mapping, got {type(article).__name__}")


def records_from_api(payloads: Iterable[Mapping[str, Any]]) -> Tuple[ArticleRecord, ...]:
    """Convert a list of API articles, skipping entries that are not objects."""
    return tuple(
        ArticleRecord.from_api_article(p) for p in payloads if isinstance(p, Mapping)
    )
