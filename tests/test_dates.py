"""Tests for publication date normalisation."""
from datetime import date, datetime

import pytest

from journal_citations.dates import DateParts, format_date


class TestFormatDate:

    def test_iso_date(self):
        """Test a plain ISO date."""
        assert format_date("2023-05-01") == DateParts("2023", "May 1, 2023")

    def test_iso_timestamp_with_zulu(self):
        """Test an ISO timestamp with a Z suffix."""
        assert format_date("2024-03-15T00:00:00.000Z") == DateParts("2024", "March 15, 2024")

    def test_date_objects(self):
        """Test date and datetime instances."""
        assert format_date(date(2020, 12, 31)).full_date == "December 31, 2020"
        assert format_date(datetime(2019, 7, 4, 10, 30)).year == "2019"

    def test_year_only(self):
        """Test a bare year."""
        assert format_date("2018").year == "2018"

    @pytest.mark.parametrize("value", [
        None, "", "   ", "not a date", "2023-13-45", "2023-05-01garbage", "2023-05-01 extra",
    ])
    def test_missing_or_invalid(self, value):
        """Test missing or unparseable dates give n.d."""
        assert format_date(value) == DateParts("n.d.", "n.d.")

    def test_default_argument(self):
        """Test calling without a date."""
        assert format_date().year == "n.d."
