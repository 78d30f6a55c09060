"""Journal date helpers."""

from __future__ import annotations

from datetime import date, timedelta


def days_since_week_start(today: date) -> int:
    """Return how many days ago the current Monday-based week began.

    Monday gives 0, Wednesday 2, Sunday 6.
    """

    day_of_week = today.isoweekday() % 7  # Sunday=0 .. Saturday=6
    return (day_of_week + 6) % 7


def week_start(today: date) -> date:
    """Return the most recent Monday on or before ``today``."""

    return today - timedelta(days=days_since_week_start(today))


def to_yyyymmdd(day: date) -> int:
    """Encode a date the way journal pages store it, e.g. ``20240102``."""

    return int(f"{day.year}{day.month:02d}{day.day:02d}")


def week_start_yyyymmdd(today: date) -> int:
    """Return the current week's Monday as a YYYYMMDD integer."""

    return to_yyyymmdd(week_start(today))


def strip_ordinal_suffix(display_name: str) -> str:
    """Drop the two-letter day suffix from a journal title.

    ``"October 26th, 2023"`` becomes ``"October 26, 2023"``. The two characters right
    before the first comma are removed unconditionally. A title without a comma is cut
    as if the comma sat on the last character, so ``"Inbox"`` comes out as ``"Inx"``.

    Args:
        display_name: Journal page title.

    Returns:
        The title without the suffix.
    """

    index = display_name.find(",")
    return display_name[: index - 2] + display_name[index:]
