"""Date parsing utilities."""

import re
from datetime import date, datetime, timedelta
from dateutil import parser as date_parser

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
MONTH_ABBREVIATIONS = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
]

_MONTH_PARAM = re.compile(r"^([a-z]{3})(\d{2})$")
_ISO_MONTH = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and the
    relative forms used when reporting time:
    - "today", "yesterday", "tomorrow"
    - "last monday" ... "last sunday" (most recent such day before today)

    Args:
        date_str: Date string

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

    if date_str.startswith("last ") and date_str[5:] in WEEKDAYS:
        target_day = WEEKDAYS.index(date_str[5:])
        days_ago = (today.weekday() - target_day) % 7
        if days_ago == 0:
            days_ago = 7
        return today - timedelta(days=days_ago)

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month_param(month_str: str) -> date:
    """Parse a month reference into the first day of that month.

    Accepts the short form used in report links ("jan24", "Dec23"), an
    ISO month ("2024-01") and "this month" / "last month".

    Raises:
        ValueError: If the month cannot be parsed
    """
    text = month_str.strip().lower()
    today = date.today()

    if text == "this month":
        return today.replace(day=1)
    if text == "last month":
        return (today.replace(day=1) - timedelta(days=1)).replace(day=1)

    match = _MONTH_PARAM.match(text)
    if match and match.group(1) in MONTH_ABBREVIATIONS:
        month = MONTH_ABBREVIATIONS.index(match.group(1)) + 1
        return date(2000 + int(match.group(2)), month, 1)

    match = _ISO_MONTH.match(text)
    if match and 1 <= int(match.group(2)) <= 12:
        return date(int(match.group(1)), int(match.group(2)), 1)

    raise ValueError(
        f"Could not parse month '{month_str}'. Use e.g. 'jan24', '2024-01' or 'last month'"
    )


def format_month_param(day: date | datetime) -> str:
    """Short month reference for a date, e.g. date(2024, 1, 15) -> "jan24"."""
    return f"{MONTH_ABBREVIATIONS[day.month - 1]}{day.year % 100:02d}"
