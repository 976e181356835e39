from __future__ import annotations

from datetime import datetime

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def to_iso_datetime(date_string: str) -> str:
    """WordPress "2025-11-05 09:19:03" -> ISO-8601 "2025-11-05T09:19:03"."""
    return date_string.replace(" ", "T", 1)


def format_post_date(date_string: str) -> str:
    """
    Display form of a post date, e.g. "November 5, 2025".

    Accepts the WordPress form and ISO-8601 (including a trailing "Z").

    Raises:
        ValueError: if the string is not a date
    """
    iso = to_iso_datetime(date_string.strip())
    if iso.endswith("Z"):
        iso = iso[:-1] + "+00:00"
    dt = datetime.fromisoformat(iso)
    # Month names spelled out here; %B depends on the process locale
    return f"{_MONTHS[dt.month - 1]} {dt.day}, {dt.year}"
