"""Line classification: the fixed, ordered parser chain."""

from __future__ import annotations

from functools import lru_cache

from .formats import (
    BareBracketTimestampParser,
    BracketSourceSyslogParser,
    BracketTagsParser,
    BracketTimestampTagsParser,
    CompositeParser,
    FallbackParser,
    LineParser,
    SyslogParser,
    UppercaseTagsParser,
)
from .models import LogRecord


@lru_cache(maxsize=1)
def default_parser() -> CompositeParser:
    """Default parser chain (first match wins, most specific first).

    The order matters: several shapes overlap (every '[X][Y]...' line also
    fits :class:`BracketTagsParser`), so reordering changes results.
    """
    return CompositeParser(
        parsers=(
            BracketTimestampTagsParser(),
            UppercaseTagsParser(),
            BracketTagsParser(),
            BracketSourceSyslogParser(),
            SyslogParser(),
            BareBracketTimestampParser(),
        ),
        fallback=FallbackParser(),
    )


def classify_line(line: str, *, parser: LineParser | None = None) -> LogRecord:
    """Classify one raw line. Never fails: unmatched lines become fallback records."""
    parser = parser or default_parser()
    record = parser.parse(line)
    if record is None:
        # custom chains may lack a fallback
        record = FallbackParser().parse(line)
    return record
