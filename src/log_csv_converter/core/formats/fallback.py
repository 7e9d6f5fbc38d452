"""Catch-all parser."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import LinePattern, LogRecord


@dataclass(frozen=True, slots=True)
class FallbackParser:
    """Keep the whole line as the message. Always matches."""

    def parse(self, line: str) -> LogRecord:
        return LogRecord(
            timestamp="",
            source="",
            level="",
            message=line,
            pattern=LinePattern.FALLBACK,
        )
