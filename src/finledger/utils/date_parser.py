"""Date parsing utilities."""

import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "last friday", etc.

    Args:
        date_str: Date string in various formats
        today: Reference day for relative dates, defaults to the current date

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            # Monday of last week
            return today - timedelta(days=today.weekday() + 7)
        elif period in _WEEKDAYS:
            days_ago = (today.weekday() - _WEEKDAYS.index(period)) % 7
            return today - timedelta(days=days_ago or 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str, today: Optional[date] = None) -> tuple[int, int]:
    """Parse a month string into a (month, year) pair.

    Accepts "2024-03", "03/2024", "March 2024", "mar 2024", "this month"
    and "last month". A bare month name refers to the current year.

    Raises:
        ValueError: If the string does not name a calendar month
    """
    text = month_str.strip().lower()
    today = today or date.today()

    if text in ("this month", "current"):
        return today.month, today.year
    if text in ("last month", "previous"):
        previous = today - relativedelta(months=1)
        return previous.month, previous.year

    match = re.fullmatch(r"(\d{4})-(\d{1,2})", text) or re.fullmatch(r"(\d{1,2})/(\d{4})", text)
    if match:
        first, second = match.groups()
        year, month = (int(first), int(second)) if len(first) == 4 else (int(second), int(first))
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month in '{month_str}'")
        return month, year

    try:
        parsed = date_parser.parse(text, default=datetime(today.year, 1, 1))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse month '{month_str}': {e}")
    return parsed.month, parsed.year


def to_transaction_datetime(day: date, now: Optional[datetime] = None) -> datetime:
    """Turn a parsed day into a transaction timestamp.

    Today keeps the current time of day so same-day entries stay in the
    order they were made; other days are placed at midnight.
    """
    now = now or datetime.now()
    if day == now.date():
        return now
    return datetime.combine(day, time())
