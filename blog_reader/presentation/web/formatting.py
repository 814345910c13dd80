"""Display helpers for article dates and bodies, registered as Jinja2 filters."""

from datetime import datetime, timedelta, timezone
from urllib.parse import quote

READING_TIME_LABEL = "5 min read"
CARD_CATEGORY_LIMIT = 2

_DAY = timedelta(days=1)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps from the API are taken to be UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def short_date(value: datetime) -> str:
    """``Sep 18, 2026``"""
    value = _as_utc(value)
    return f"{value:%b} {value.day}, {value.year}"


def long_date(value: datetime) -> str:
    """``September 18, 2026``"""
    value = _as_utc(value)
    return f"{value:%B} {value.day}, {value.year}"


def time_ago(value: datetime, now: datetime | None = None) -> str:
    """Relative label for an article card.

    Whole elapsed days decide the label: under one day is "Today", then
    "N day(s) ago", then floored weeks below 30 days, then the short date.
    """
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    days = (now - _as_utc(value)) // _DAY

    if days <= 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        return f"{days // 7} weeks ago"
    return short_date(value)


def card_categories(categories: list[str]) -> list[str]:
    return categories[:CARD_CATEGORY_LIMIT]


def query_value(value: str) -> str:
    """Percent-encode a value for a query string, ``/`` included."""
    return quote(str(value), safe="")
