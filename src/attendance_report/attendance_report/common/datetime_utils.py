from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_calendar_date(value) -> date:
    """Calendar date of a date, datetime or ISO string.

    Strings keep their own ``YYYY-MM-DD`` prefix, so ``2024-03-07T23:30:00Z``
    stays on the 7th regardless of the local time zone.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    for sep in ("T", " "):
        text = text.split(sep, 1)[0]
    return parse_iso_date(text)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
