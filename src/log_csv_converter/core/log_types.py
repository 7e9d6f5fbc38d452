"""Grouping key derivation from log file names."""

from __future__ import annotations

import re

_LOG_MARKER_RE = re.compile(r"\.log", re.IGNORECASE)


def extract_log_type(file_name: str) -> str:
    """Return the lowercase log type for a file name.

    Everything from the first '.log' on is dropped, then trailing digits, so
    rotated files share a key: 'syslog.log', 'syslog.log.1' and
    'SYSLOG.LOG.23' all map to 'syslog'. The result may be empty.
    """
    base = file_name
    m = _LOG_MARKER_RE.search(base)
    if m:
        base = base[: m.start()]
    return base.rstrip("0123456789").lower()
