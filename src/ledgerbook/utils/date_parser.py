"""Date parsing utilities."""

import re
from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from ledgerbook.logging_setup import get_logger

logger = get_logger(__name__)

_ISO_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_SLASH_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2,4})$")
_DASH_DATE = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{2,4})$")
_MONTH_KEY = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_date(date_str: str) -> date:
    """Parse a user-supplied date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative words "today", "yesterday" and "tomorrow".

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        m = _ISO_DATE.match(date_str)
        if m:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        # Same regional default as QIF dates: 01/02/2024 is 1 February.
        dt = date_parser.parse(date_str, dayfirst=True)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def _expand_year(year: int) -> int:
    if year < 100:
        return year + (2000 if year < 50 else 1900)
    return year


def _resolve_day_month(a: int, b: int) -> tuple[int, int]:
    """Return ``(day, month)`` for the first two components of A/B/Y.

    A first part above 12 must be the day, a second part above 12 must be
    the day. When both could be a month, day-first (DD/MM) wins.
    """
    if a > 12 and b <= 12:
        return a, b
    if b > 12 and a <= 12:
        return b, a
    return a, b


def normalize_qif_date(date_str: str, today: date | None = None) -> date:
    """Convert a QIF ``D`` field into a calendar date.

    Formats, tried in order:
    - ISO ``YYYY-M-D`` (one or two digit month/day)
    - ``A/B/Y`` or ``A-B-Y`` with a 2 or 4 digit year; two digit years below
      50 are 20YY, others 19YY

    Text matching neither pattern, or naming an impossible calendar day,
    resolves to ``today`` (the system date by default) and logs a warning.

    Args:
        date_str: Raw date text from the QIF file
        today: Fallback date, defaults to ``date.today()``

    Returns:
        Calendar date
    """
    s = date_str.strip()

    try:
        m = _ISO_DATE.match(s)
        if m:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

        m = _SLASH_DATE.match(s) or _DASH_DATE.match(s)
        if m:
            day, month = _resolve_day_month(int(m.group(1)), int(m.group(2)))
            return date(_expand_year(int(m.group(3))), month, day)
    except ValueError:
        pass

    fallback = today if today is not None else date.today()
    logger.warning("Unrecognized QIF date %r, using %s", date_str, fallback.isoformat())
    return fallback


def format_month(value: date) -> str:
    """Return the ``YYYY-MM`` month key for a date."""
    return value.strftime("%Y-%m")


def get_month_range(month: str) -> tuple[date, date]:
    """Get the half-open date range covering a ``YYYY-MM`` month.

    Args:
        month: Month key such as "2024-03"

    Returns:
        Tuple of (first day of the month, first day of the next month)

    Raises:
        ValueError: If month string is not a valid ``YYYY-MM`` key
    """
    m = _MONTH_KEY.match(month.strip())
    if not m:
        raise ValueError(f"Invalid month '{month}': expected YYYY-MM")
    try:
        start_date = date(int(m.group(1)), int(m.group(2)), 1)
    except ValueError as e:
        raise ValueError(f"Invalid month '{month}': {e}")
    return (start_date, start_date + relativedelta(months=1))


def get_last_month_range(today: date | None = None) -> tuple[date, date]:
    """Get the half-open date range of the calendar month before ``today``."""
    today = today if today is not None else date.today()
    end_date = today.replace(day=1)
    start_date = end_date - relativedelta(months=1)
    return (start_date, end_date)
