"""Publication date normalisation shared by every citation style."""
from datetime import date, datetime
from typing import NamedTuple, Optional, Union

NO_DATE = "n.d."

# US-English month names; strftime("%B") would follow the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class DateParts(NamedTuple):
    year: str
    full_date: str


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Parse an ISO date or timestamp, returning None when it cannot be read."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y-%m", "%Y"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_date(date_string: Union[str, date, None] = None) -> DateParts:
    """
    Split a publication date into the year and a long-form date.

    Examples:
        "2023-05-01" -> DateParts("2023", "May 1, 2023")
        None         -> DateParts("n.d.", "n.d.")
    """
    parsed = parse_date(date_string)
    if parsed is None:
        return DateParts(NO_DATE, NO_DATE)
    year = f"{parsed.year:04d}"
    full_date = f"{MONTH_NAMES[parsed.month - 1]} {parsed.day}, {year}"
    return DateParts(year, full_date)
