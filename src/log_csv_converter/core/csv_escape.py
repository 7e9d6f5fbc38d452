"""CSV field escaping for the output files."""

from __future__ import annotations

from collections.abc import Iterable

CSV_HEADER = "Timestamp,Source,Log Level,Message,File"

_NEEDS_QUOTES = (",", "\n", '"')


def escape_csv_field(field: str) -> str:
    """Double embedded quotes; wrap in quotes if the field has ',', newline or '"'."""
    out = field.replace('"', '""')
    if any(ch in out for ch in _NEEDS_QUOTES):
        out = f'"{out}"'
    return out


def format_csv_row(fields: Iterable[str]) -> str:
    """Join escaped fields with commas (no line terminator)."""
    return ",".join(escape_csv_field(f) for f in fields)
