"""Command-line entry point for generating article citations."""
import argparse
import json
import logging
import sys
from typing import List, Optional

from .api import JournalAPI
from .citations import CITATION_FORMATS, generate_all, generate_citation
from .config import Config
from .models import ArticleRecord
from .utils.error_handling import APIError, UnsupportedFormatError, file_operation_handler
from .utils.logging_setup import setup_logging, log_operation


@file_operation_handler
def load_article_file(path: str) -> Optional[ArticleRecord]:
    """Load an article record from a JSON file (record or API shape)."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError("article file must contain a JSON object")
    # Journal API documents carry an _id; plain records do not
    if "_id" in data:
        return ArticleRecord.from_api_article(data)
    return ArticleRecord.from_dict(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="journal_citations",
        description="Generate citations for journal articles",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", help="JSON file holding the article")
    source.add_argument("--article-id", help="Fetch the article from the journal API")
    parser.add_argument("--format", default=Config.DEFAULT_FORMAT,
                        help=f"Citation format ({', '.join(CITATION_FORMATS)})")
    parser.add_argument("--all", action="store_true", help="Print every citation format")
    parser.add_argument("--list-formats", action="store_true", help="List formats and exit")
    parser.add_argument("--api-url", default=None, help="Override the journal API base URL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main program entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(log_dir=None, level=Config.LOG_LEVEL)

    if args.list_formats:
        for key, fmt in CITATION_FORMATS.items():
            print(f"{key:10} {fmt.name} - {fmt.description}")
        return 0

    if args.file:
        article = load_article_file(args.file)
        if article is None:
            print(f"Could not read article from {args.file}", file=sys.stderr)
            return 1
    elif args.article_id:
        try:
            article = JournalAPI(base_url=args.api_url).get_article(args.article_id)
        except APIError as e:
            logging.error(f"Failed to fetch article {args.article_id}: {e}")
            print(f"Could not fetch article: {e}", file=sys.stderr)
            return 1
    else:
        print("Provide --file or --article-id", file=sys.stderr)
        return 2

    log_operation("Citation", f"rendering '{article.title}'")
    if args.all:
        for key, citation in generate_all(article).items():
            print(f"== {CITATION_FORMATS[key].name}")
            print(citation)
            print()
        return 0

    try:
        print(generate_citation(article, args.format))
    except UnsupportedFormatError as e:
        print(str(e), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
