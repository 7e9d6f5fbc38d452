"""Parser composition utilities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..models import LogRecord
from .base import LineParser


@dataclass(frozen=True, slots=True)
class CompositeParser:
    """Try parsers in order; the first successful parse wins.

    When ``fallback`` is set it receives every line no parser claimed, which
    makes the chain total.
    """

    parsers: Sequence[LineParser]
    fallback: LineParser | None = None

    def parse(self, line: str) -> LogRecord | None:
        """Return the first successful parse, else the fallback's result."""
        for p in self.parsers:
            out = p.parse(line)
            if out is not None:
                return out
        if self.fallback is not None:
            return self.fallback.parse(line)
        return None
