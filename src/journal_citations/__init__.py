"""Citation generation for Advances in Medicine & Health Sciences Journal articles."""
from .citations import (
    CITATION_FORMATS,
    FORMAT_KINDS,
    CitationFormat,
    generate_all,
    generate_citation,
    list_formats,
)
from .config import Config
from .metadata import generate_dublin_core, generate_highwire_press
from .models import ArticleRecord, Author, VolumeInfo, resolve_volume

__version__ = "1.0.0"
__all__ = [
    "CITATION_FORMATS",
    "FORMAT_KINDS",
    "CitationFormat",
    "generate_all",
    "generate_citation",
    "list_formats",
    "generate_dublin_core",
    "generate_highwire_press",
    "Config",
    "ArticleRecord",
    "Author",
    "VolumeInfo",
    "resolve_volume",
]
