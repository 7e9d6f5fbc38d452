"""Line parsers for the supported device log formats.

Each parser recognizes one line shape; :class:`CompositeParser` chains them
so the first match wins.
"""

from __future__ import annotations

from .base import LineParser
from .bracket import BareBracketTimestampParser, BracketTimestampTagsParser
from .composite import CompositeParser
from .fallback import FallbackParser
from .syslog import BracketSourceSyslogParser, SyslogParser
from .tags import BracketTagsParser, UppercaseTagsParser

__all__ = [
    "BareBracketTimestampParser",
    "BracketSourceSyslogParser",
    "BracketTagsParser",
    "BracketTimestampTagsParser",
    "CompositeParser",
    "FallbackParser",
    "LineParser",
    "SyslogParser",
    "UppercaseTagsParser",
]
