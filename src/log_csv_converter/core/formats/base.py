"""Parser interface and shared pattern fragments."""

from __future__ import annotations

from typing import Protocol

from ..models import LogRecord

# "02/19 1:15:01" style timestamp used inside square brackets.
NUMERIC_TS = r"[\d/]+\s+\d{1,2}:\d{1,2}:\d{1,2}"

# "Feb 14 2:20:11" style timestamp (month name first).
SYSLOG_TS = r"[A-Z][a-z]{2}\s+\d+\s+\d{1,2}:\d{1,2}:\d{1,2}"


class LineParser(Protocol):
    """Parser interface: return a LogRecord if the line matches, else None."""

    def parse(self, line: str) -> LogRecord | None:
        """Parse a raw line (without its trailing newline)."""
        ...
