"""Date/time parsing helpers.

Provides the format checks used by the form contracts and the helpers
that turn a form date and time into an aware timestamp. The ``check_*``
functions raise ``ValueError`` on invalid input; callers in
``meetup_issue.schemas`` convert those into field errors.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo
from typing import Union
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "UTC"

_FORM_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_FORM_TIME_RE = re.compile(r"^[0-9]{2}:[0-9]{2}$")
_ISO_TIMESTAMP_RE = re.compile(
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}"
    r"T[0-9]{2}:[0-9]{2}(?::[0-9]{2}(?:[.,][0-9]{1,9})?)?"
    r"(?P<offset>Z|[+-][0-9]{2}:?[0-9]{2}(?::[0-9]{2}(?:\.[0-9]{1,6})?)?)?$"
)

TimezoneLike = Union[str, tzinfo]


def _replace_z_suffix(value: str) -> str:
    if value.endswith("Z"):
        return value[:-1] + "+00:00"
    return value


def _trim_fraction(value: str) -> str:
    # fromisoformat accepts at most microsecond precision
    match = re.search(r"[.,](\d+)", value)
    if match and len(match.group(1)) > 6:
        start, end = match.span(1)
        value = value[:start] + match.group(1)[:6] + value[end:]
    return value.replace(",", ".")


def check_form_date(value: str) -> str:
    """Check a ``YYYY-MM-DD`` calendar date and return it unchanged.

    Raises:
        ValueError: If the pattern does not match or the date does not
            exist (e.g. ``2023-02-30``).
    """

    if not _FORM_DATE_RE.match(value):
        raise ValueError("Invalid date (format YYYY-MM-DD)")
    datetime.strptime(value, "%Y-%m-%d")
    return value


def check_form_time(value: str) -> str:
    """Check a 24h ``HH:MM`` clock time and return it unchanged.

    Raises:
        ValueError: If the pattern does not match or hour/minute are out
            of range (e.g. ``25:00``).
    """

    if not _FORM_TIME_RE.match(value):
        raise ValueError("Invalid time (format HH:MM)")
    datetime.strptime(value, "%H:%M")
    return value


def check_iso_timestamp(value: str, *, require_offset: bool = False) -> str:
    """Check ISO 8601 timestamp syntax and return the value unchanged.

    Args:
        value: Candidate timestamp, e.g. ``2024-03-01T18:30:00.000Z``.
        require_offset: Also require a ``Z`` marker or numeric offset.

    Raises:
        ValueError: If the value is not an ISO 8601 timestamp.
    """

    match = _ISO_TIMESTAMP_RE.match(value)
    if not match:
        raise ValueError("Invalid ISO 8601 timestamp")
    if require_offset and not match.group("offset"):
        raise ValueError("Timestamp must include a UTC offset or 'Z'")
    parse_iso8601(value, assume_utc=False)
    return value


def parse_iso8601(value: str, *, assume_utc: bool = True) -> datetime:
    """Parse an ISO 8601 string into a datetime.

    Accepts values ending with 'Z' by converting to '+00:00'. Naive
    values are treated as UTC unless ``assume_utc`` is false.

    Raises:
        ValueError: If the timestamp cannot be parsed.
    """

    normalized = _trim_fraction(_replace_z_suffix(value))
    dt = datetime.fromisoformat(normalized)
    if dt.tzinfo is None and assume_utc:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def resolve_timezone(tz: TimezoneLike) -> tzinfo:
    """Return a tzinfo for an IANA name or pass a tzinfo through.

    Raises:
        ValueError: If the name is not a known timezone.
    """

    if isinstance(tz, tzinfo):
        return tz
    if tz.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(tz)
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {tz}") from exc


def combine_form_date_and_time(
    date: str, time: str, *, tz: TimezoneLike = DEFAULT_TIMEZONE
) -> str:
    """Combine a form date and time into an ISO 8601 timestamp with offset.

    The wall-clock value ``{date}T{time}:00`` is interpreted in ``tz``.

    Example:
        >>> combine_form_date_and_time("2024-03-01", "18:30")
        '2024-03-01T18:30:00+00:00'
        >>> combine_form_date_and_time("2024-07-01", "18:30", tz="Europe/Oslo")
        '2024-07-01T18:30:00+02:00'
    """

    local = datetime.fromisoformat(f"{date}T{time}:00")
    return local.replace(tzinfo=resolve_timezone(tz)).isoformat()


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime as ISO 8601, keeping its offset."""

    return value.isoformat()
