"""Parsers for lines that start with two bracketed tags and no timestamp."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import LinePattern, LogRecord


@dataclass(frozen=True, slots=True)
class UppercaseTagsParser:
    """Parse '[INFO] [FOTA] message' lines (level first, then source).

    Both tags must be uppercase letters only and at least one space must
    separate the second tag from the message. Must run before
    :class:`BracketTagsParser`, which would otherwise capture these lines
    with source and level swapped.
    """

    _re = re.compile(
        r"^\s*\[(?P<level>[A-Z]+)\]\s*\[(?P<source>[A-Z]+)\]\s+(?P<msg>.*)$",
        re.ASCII,
    )

    def parse(self, line: str) -> LogRecord | None:
        """Parse an uppercase double-tagged line into a LogRecord."""
        m = self._re.match(line)
        if not m:
            return None

        return LogRecord(
            timestamp="",
            source=m.group("source"),
            level=m.group("level"),
            message=m.group("msg"),
            pattern=LinePattern.UPPERCASE_TAGS,
        )


@dataclass(frozen=True, slots=True)
class BracketTagsParser:
    """Parse '[MMM][INFO]message' lines (source first, then level)."""

    _re = re.compile(
        r"^\[(?P<source>[^\]]+)\]\[(?P<level>[^\]]+)\]\s*(?P<msg>.*)$",
        re.ASCII,
    )

    def parse(self, line: str) -> LogRecord | None:
        """Parse a generic double-tagged line into a LogRecord."""
        m = self._re.match(line)
        if not m:
            return None

        return LogRecord(
            timestamp="",
            source=m.group("source"),
            level=m.group("level"),
            message=m.group("msg"),
            pattern=LinePattern.BRACKET_TAGS,
        )
