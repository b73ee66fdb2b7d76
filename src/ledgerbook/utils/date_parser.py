"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts absolute dates ("2024-01-15", "January 15, 2024") and the
    relative keywords "today", "yesterday" and "tomorrow".

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    relative = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in relative:
        return relative[text]

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError, TypeError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: date | None = None) -> tuple[date, date]:
    """Get start and end dates for a named reporting period.

    "this-*" periods run from the start of the period up to today; "last-*"
    periods cover the whole previous period.

    Args:
        period: One of PERIODS
        today: Reference day (defaults to the current date)

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()
    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)
    week_start = today - timedelta(days=today.weekday())

    if period == "this-month":
        return month_start, today
    if period == "this-year":
        return year_start, today
    if period == "this-week":
        return week_start, today
    if period == "last-month":
        return month_start - relativedelta(months=1), month_start - timedelta(days=1)
    if period == "last-year":
        return year_start - relativedelta(years=1), year_start - timedelta(days=1)
    if period == "last-week":
        return week_start - timedelta(days=7), week_start - timedelta(days=1)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
