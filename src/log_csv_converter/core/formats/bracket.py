"""Parsers for lines that start with a bracketed numeric timestamp."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import LinePattern, LogRecord
from ..timestamps import normalize_timestamp
from .base import NUMERIC_TS


@dataclass(frozen=True, slots=True)
class BracketTimestampTagsParser:
    """Parse '[02/19 01:15:01][CM][INFO]message' lines."""

    _re = re.compile(
        rf"^\[(?P<ts>{NUMERIC_TS})\]\[(?P<source>[^\]]+)\]\[(?P<level>[^\]]+)\](?P<msg>.*)$",
        re.ASCII,
    )

    def parse(self, line: str) -> LogRecord | None:
        """Parse a timestamped, double-tagged line into a LogRecord."""
        m = self._re.match(line)
        if not m:
            return None

        return LogRecord(
            timestamp=normalize_timestamp(m.group("ts")),
            source=m.group("source"),
            level=m.group("level"),
            message=m.group("msg"),
            pattern=LinePattern.BRACKET_TIMESTAMP_TAGS,
        )


@dataclass(frozen=True, slots=True)
class BareBracketTimestampParser:
    """Parse lines holding nothing but '[12/31 18:35:49]'."""

    _re = re.compile(rf"^\[(?P<ts>{NUMERIC_TS})\]$", re.ASCII)

    def parse(self, line: str) -> LogRecord | None:
        m = self._re.match(line)
        if not m:
            return None

        return LogRecord(
            timestamp=normalize_timestamp(m.group("ts")),
            source="",
            level="",
            message="",
            pattern=LinePattern.BARE_TIMESTAMP,
        )
