"""
dates.py – Date parsing and period helpers.

Raw facts carry dates as ISO strings; every conversion to ``datetime.date``
flows through ``parse_date`` so malformed values are handled in one place.
"""

from __future__ import annotations

import datetime


def parse_date(value: str | datetime.date | datetime.datetime | None) -> datetime.date | None:
    """
    Parse various date representations to a ``datetime.date``.

    Handles:
    - ISO strings: '2023-12-31'
    - Compact strings: '20231231'
    - Datetime objects (extracts date part)
    - None (returns None)

    Raises
    ------
    ValueError: for strings in no known format.
    TypeError: for unsupported input types.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        for fmt in ("%Y-%m-%d", "%Y%m%d", "%m/%d/%Y"):
            try:
                return datetime.datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Cannot parse date string: {value!r}")
    raise TypeError(f"Unsupported date type: {type(value)}")


def parse_date_or_none(value: object) -> datetime.date | None:
    """Like ``parse_date`` but returns None instead of raising on bad input."""
    try:
        return parse_date(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def format_date(value: datetime.date | None) -> str | None:
    """ISO-format a date, passing None through."""
    return value.isoformat() if value is not None else None
