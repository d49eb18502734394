from __future__ import annotations

from datetime import date, datetime

from dateutil import parser as dateutil_parser

from .errors import DateParseError, NumericParseError

# Fills in components missing from partial dates such as "March 2017".
_DEFAULT_DATE = datetime(1970, 1, 1)


def parse_minutes(value: str | None, field_name: str = "time") -> int:
    """Coerce a raw session duration to whole minutes."""
    if value is None:
        raise NumericParseError(field_name, value)

    try:
        return int(value)
    except ValueError as exc:
        raise NumericParseError(field_name, value) from exc


def parse_calendar_date(value: str | None, field_name: str = "date") -> date:
    """Parse a raw session date, accepting ISO-8601 first and free-form text second."""
    if value is None or not value.strip():
        raise DateParseError(field_name, value)

    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        pass

    try:
        return dateutil_parser.parse(value, default=_DEFAULT_DATE).date()
    except (ValueError, OverflowError) as exc:
        raise DateParseError(field_name, value) from exc


def format_minutes(total_minutes: int) -> str:
    return f"{total_minutes} min."
