"""Core data models for log conversion."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class LinePattern(str, Enum):
    """Pattern branch that classified a line (in priority order)."""

    BRACKET_TIMESTAMP_TAGS = "bracket_timestamp_tags"
    UPPERCASE_TAGS = "uppercase_tags"
    BRACKET_TAGS = "bracket_tags"
    BRACKET_SOURCE_SYSLOG = "bracket_source_syslog"
    SYSLOG = "syslog"
    BARE_TIMESTAMP = "bare_timestamp"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class LogRecord:
    """One classified log line, in CSV column order."""

    timestamp: str
    source: str
    level: str
    message: str
    file_name: str = ""  # set by the reader, never by parsers
    pattern: LinePattern = LinePattern.FALLBACK

    def with_file(self, file_name: str) -> LogRecord:
        """Return a copy tagged with the originating file name."""
        return replace(self, file_name=file_name)

    def csv_fields(self) -> tuple[str, str, str, str, str]:
        return (self.timestamp, self.source, self.level, self.message, self.file_name)


# log type key -> records in read order
LogGroups = dict[str, list[LogRecord]]
