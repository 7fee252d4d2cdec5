"""
Citation API

Flask endpoints backing the "Cite this article" dialog.
Returns JSON for the format list and generated citations.
"""
import logging
from typing import Any, Dict, Optional

from flask import Blueprint, Flask, current_app, jsonify, request

from .api import JournalAPI
from .citations import generate_all, get_format, list_formats
from .metadata import generate_dublin_core, generate_highwire_press
from .models import ArticleRecord
from .utils.error_handling import APIError, UnsupportedFormatError

logger = logging.getLogger(__name__)

# Create blueprint
citations_bp = Blueprint('citations', __name__, url_prefix='/api/citations')


def _citation_response(article: ArticleRecord, kind: Optional[str]):
    """Render one format, or all of them when no format was requested."""
    if not kind:
        return jsonify({'citations': generate_all(article)})
    try:
        fmt = get_format(kind)
    except UnsupportedFormatError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'format': fmt.key, 'citation': fmt.generate(article)})


def _journal_api() -> JournalAPI:
    return current_app.config.get('JOURNAL_API') or JournalAPI()


@citations_bp.route('/formats', methods=['GET'])
def get_formats():
    """
    List available citation formats.

    Returns:
        [{'key': 'apa', 'name': 'APA 7th Edition', 'description': '...'}, ...]
    """
    return jsonify(list_formats())


@citations_bp.route('/generate', methods=['POST'])
def generate():
    """
    Generate citations for an article supplied in the request body.

    Body:
        {'article': {...}, 'format': 'apa'}   # 'format' optional
    """
    body: Dict[str, Any] = request.get_json(silent=True) or {}
    article_data = body.get('article')
    if not isinstance(article_data, dict):
        return jsonify({'error': "Request body must contain an 'article' object"}), 400

    article = ArticleRecord.from_dict(article_data)
    return _citation_response(article, body.get('format'))


@citations_bp.route('/articles/<article_id>', methods=['GET'])
def article_citations(article_id: str):
    """Fetch an article from the journal API and generate its citations."""
    try:
        article = _journal_api().get_article(article_id)
    except APIError as e:
        logger.error(f"Could not load article {article_id}: {e}")
        status = 404 if e.status_code == 404 else 502
        return jsonify({'error': str(e)}), status

    return _citation_response(article, request.args.get('format'))


@citations_bp.route('/articles/<article_id>/metadata', methods=['GET'])
def article_metadata(article_id: str):
    """
    Scholarly indexing tags for an article.

    Returns:
        {'highwirePress': {'citation_title': ...}, 'dublinCore': {'DC.title': ...}}
    """
    try:
        article = _journal_api().get_article(article_id)
    except APIError as e:
        logger.error(f"Could not load article {article_id}: {e}")
        status = 404 if e.status_code == 404 else 502
        return jsonify({'error': str(e)}), status

    return jsonify({
        'highwirePress': generate_highwire_press(article),
        'dublinCore': generate_dublin_core(article),
    })


def create_app(journal_api: Optional[JournalAPI] = None) -> Flask:
    """Build a Flask app serving the citation endpoints."""
    app = Flask(__name__)
    app.config['JOURNAL_API'] = journal_api
    app.register_blueprint(citations_bp)
    return app
