"""Parsers for BSD-syslog style lines ('Feb 14 02:20:11 user.notice TAG: msg')."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..models import LinePattern, LogRecord
from ..timestamps import normalize_timestamp
from .base import SYSLOG_TS

logger = logging.getLogger(__name__)


def _normalize_or_none(ts: str) -> str | None:
    """Normalize a month-name timestamp; None when the month is unknown."""
    try:
        return normalize_timestamp(ts)
    except ValueError as e:
        logger.debug("Rejecting syslog match: %s", e)
        return None


@dataclass(frozen=True, slots=True)
class BracketSourceSyslogParser:
    """Parse '[cellwan] Feb 14 02:20:11 user.notice DALCMD: message' lines.

    The source comes from the brackets, so the syslog tag is folded into the
    message as 'TAG message' (or just 'TAG' when nothing follows the colon).
    """

    _re = re.compile(
        r"^\[(?P<source>[^\]]+)\]\s+"
        rf"(?P<ts>{SYSLOG_TS})\s+"
        r"(?P<level>\S+)\s+"
        r"(?P<tag>\S+):\s*"
        r"(?P<msg>.*)$",
        re.ASCII,
    )

    def parse(self, line: str) -> LogRecord | None:
        """Parse a bracket-sourced syslog line into a LogRecord."""
        m = self._re.match(line)
        if not m:
            return None

        ts = _normalize_or_none(m.group("ts"))
        if ts is None:
            return None

        tag = m.group("tag")
        msg = m.group("msg")
        return LogRecord(
            timestamp=ts,
            source=m.group("source"),
            level=m.group("level"),
            message=f"{tag} {msg}" if msg else tag,
            pattern=LinePattern.BRACKET_SOURCE_SYSLOG,
        )


@dataclass(frozen=True, slots=True)
class SyslogParser:
    """Parse 'Feb 19 01:55:01 user.info zcmdModuleCfg: message' lines."""

    _re = re.compile(
        rf"^(?P<ts>{SYSLOG_TS})\s+"
        r"(?P<level>\S+)\s+"
        r"(?P<tag>\S+):\s*"
        r"(?P<msg>.*)$",
        re.ASCII,
    )

    def parse(self, line: str) -> LogRecord | None:
        """Parse a syslog line into a LogRecord (the tag becomes the source)."""
        m = self._re.match(line)
        if not m:
            return None

        ts = _normalize_or_none(m.group("ts"))
        if ts is None:
            return None

        return LogRecord(
            timestamp=ts,
            source=m.group("tag"),
            level=m.group("level"),
            message=m.group("msg"),
            pattern=LinePattern.SYSLOG,
        )
