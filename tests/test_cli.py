"""Tests for the command-line entry point."""
import json
from unittest.mock import patch

from journal_citations.__main__ import load_article_file, main
from journal_citations.models import ArticleRecord
from journal_citations.utils.error_handling import APIError


def write_article(tmp_path, data):
    path = tmp_path / "article.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestLoadArticleFile:

    def test_record_shape(self, tmp_path):
        """Test loading a plain article record."""
        path = write_article(tmp_path, {"title": "T", "publishedDate": "2020-01-01"})
        assert load_article_file(path).published_date == "2020-01-01"

    def test_api_shape(self, tmp_path, sample_api_article):
        """Test loading a journal API document."""
        path = write_article(tmp_path, sample_api_article)
        assert load_article_file(path).pages == "45-52"

    def test_missing_file(self, tmp_path):
        """Test a missing file yields None."""
        assert load_article_file(str(tmp_path / "nope.json")) is None

    def test_invalid_json(self, tmp_path):
        """Test invalid JSON yields None."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_article_file(str(path)) is None


class TestMain:

    def test_single_format(self, tmp_path, capsys):
        """Test printing one citation format."""
        path = write_article(tmp_path, {
            "title": "X",
            "authors": [{"firstName": "Jane", "lastName": "Doe"}],
            "publishedDate": "2023-05-01",
        })
        assert main(["--file", path, "--format", "vancouver"]) == 0
        assert capsys.readouterr().out.strip() == "Doe J. X. Adv Med Health Sci J. 2023."

    def test_all_formats(self, tmp_path, capsys):
        """Test printing every citation format."""
        path = write_article(tmp_path, {"title": "X"})
        assert main(["--file", path, "--all"]) == 0
        out = capsys.readouterr().out
        assert "== BibTeX" in out
        assert "@article{articlen.d.," in out

    def test_list_formats(self, capsys):
        """Test listing available formats."""
        assert main(["--list-formats"]) == 0
        assert "APA 7th Edition" in capsys.readouterr().out

    def test_unknown_format(self, tmp_path):
        """Test an unknown format exits with 2."""
        path = write_article(tmp_path, {"title": "X"})
        assert main(["--file", path, "--format", "harvard"]) == 2

    def test_no_source(self):
        """Test running without an article source exits with 2."""
        assert main([]) == 2

    def test_article_id(self, capsys):
        """Test citing an article fetched by id."""
        with patch("journal_citations.__main__.JournalAPI") as api_cls:
            api_cls.return_value.get_article.return_value = ArticleRecord(title="Fetched")
            assert main(["--article-id", "abc", "--format", "apa"]) == 0
        assert "Fetched" in capsys.readouterr().out

    def test_article_id_failure(self):
        """Test an API failure exits with 1."""
        with patch("journal_citations.__main__.JournalAPI") as api_cls:
            api_cls.return_value.get_article.side_effect = APIError("down", 503)
            assert main(["--article-id", "abc"]) == 1
