"""Timestamp normalization to the canonical ``MM/DD HH:MM:SS`` form."""

from __future__ import annotations

from types import MappingProxyType

MONTHS = MappingProxyType(
    {
        "Jan": "01",
        "Feb": "02",
        "Mar": "03",
        "Apr": "04",
        "May": "05",
        "Jun": "06",
        "Jul": "07",
        "Aug": "08",
        "Sep": "09",
        "Oct": "10",
        "Nov": "11",
        "Dec": "12",
    }
)


class UnknownMonthError(ValueError):
    """Raised when a month abbreviation is not in :data:`MONTHS`."""


def _two_digit(value: str) -> str:
    try:
        return f"{int(value):02d}"
    except ValueError as e:
        raise ValueError(f"Not a number in timestamp: {value!r}") from e


def _pad_time(time_str: str) -> str:
    parts = time_str.strip().split(":")
    if len(parts) != 3:
        raise ValueError(f"Time must look like H:M:S, got {time_str!r}")
    return ":".join(_two_digit(p) for p in parts)


def normalize_timestamp(ts: str) -> str:
    """Normalize a timestamp into ``MM/DD HH:MM:SS``.

    Two spellings are supported:

    - ``"Feb 14 2:20:11"`` (month name first) becomes ``"02/14 02:20:11"``.
    - ``"02/19 1:5:9"`` keeps the date part verbatim and pads the time:
      ``"02/19 01:05:09"``.

    Padding is purely lexical; day ranges are not validated. Empty input is
    returned unchanged. Raises :class:`UnknownMonthError` for a month name
    outside the table and ``ValueError`` for non-numeric fields.
    """
    if not ts:
        return ts

    if ts[0].isalpha():
        parts = ts.split()
        if len(parts) != 3:
            raise ValueError(f"Expected 'Mon D H:M:S', got {ts!r}")
        month_str, day, time_str = parts
        month = MONTHS.get(month_str)
        if month is None:
            raise UnknownMonthError(f"Unknown month abbreviation: {month_str!r}")
        return f"{month}/{_two_digit(day)} {_pad_time(time_str)}"

    parts = ts.split(None, 1)
    if len(parts) < 2:
        return ts
    date_part, time_part = parts
    return f"{date_part} {_pad_time(time_part)}"
