"""Log discovery, reading and grouping.

This module is the main integration point that reads log files and returns
classified records grouped by log type.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles

from .classifier import classify_line, default_parser
from .config import ConverterConfig
from .formats import LineParser
from .log_types import extract_log_type
from .models import LogGroups, LogRecord

logger = logging.getLogger(__name__)

_ROTATED_RE = re.compile(r"\.log\.\d+$", re.IGNORECASE | re.ASCII)


@dataclass(slots=True)
class ReadResult:
    """Outcome of reading every input file, in processing order."""

    groups: LogGroups = field(default_factory=dict)
    files_read: list[Path] = field(default_factory=list)
    files_skipped: list[tuple[Path, str]] = field(default_factory=list)

    def pattern_counts(self) -> dict[str, int]:
        counts: Counter[str] = Counter()
        for records in self.groups.values():
            counts.update(r.pattern.value for r in records)
        return dict(sorted(counts.items()))


def validate_input_dir(input_dir: str | Path) -> Path:
    """Return the directory as a Path; raise if it is missing or not a directory."""
    path = Path(input_dir)
    if not path.exists():
        raise FileNotFoundError(f"{path} is not a valid folder")
    if not path.is_dir():
        raise NotADirectoryError(f"{path} is not a valid folder")
    return path


def _is_log_file(path: Path, cfg: ConverterConfig) -> bool:
    if path.suffix.lower() in cfg.extensions:
        return True
    return cfg.include_rotated and bool(_ROTATED_RE.search(path.name))


def discover_log_files(input_dir: str | Path, cfg: ConverterConfig | None = None) -> list[Path]:
    """List the regular log files directly inside input_dir, sorted by name."""
    cfg = cfg or ConverterConfig()
    path = validate_input_dir(input_dir)
    return sorted(
        (p for p in path.iterdir() if p.is_file() and _is_log_file(p, cfg)),
        key=lambda p: p.name,
    )


async def read_log_file(
    path: Path,
    *,
    cfg: ConverterConfig | None = None,
    parser: LineParser | None = None,
) -> list[LogRecord]:
    """Classify every non-empty line of one file, in file order.

    Raises OSError when the file cannot be opened or read.
    """
    cfg = cfg or ConverterConfig()
    parser = parser or default_parser()
    name = path.name
    records: list[LogRecord] = []

    # split on "\n" only; a lone "\r" stays inside the line
    async with aiofiles.open(
        path, encoding=cfg.encoding, errors=cfg.decode_errors, newline="\n"
    ) as f:
        async for line in f:
            line = line.rstrip("\r\n")
            if not line:
                continue
            records.append(classify_line(line, parser=parser).with_file(name))

    logger.debug("Read %d records from %s", len(records), path)
    return records


async def _read_or_error(
    path: Path,
    *,
    cfg: ConverterConfig,
    parser: LineParser,
    limiter: asyncio.Semaphore,
) -> list[LogRecord] | Exception:
    async with limiter:
        try:
            return await read_log_file(path, cfg=cfg, parser=parser)
        except (OSError, UnicodeDecodeError) as exc:
            return exc


async def collect_groups(
    paths: Sequence[Path],
    *,
    cfg: ConverterConfig | None = None,
    parser: LineParser | None = None,
) -> ReadResult:
    """Read all files and group records by log type.

    With ``cfg.max_workers > 1`` files are read concurrently, then merged in
    the order of ``paths`` so the result matches a sequential run.
    """
    cfg = cfg or ConverterConfig()
    parser = parser or default_parser()
    if cfg.max_workers < 1:
        raise ValueError("max_workers must be >= 1")

    limiter = asyncio.Semaphore(cfg.max_workers)
    outcomes = await asyncio.gather(
        *(_read_or_error(p, cfg=cfg, parser=parser, limiter=limiter) for p in paths)
    )

    result = ReadResult()
    for path, outcome in zip(paths, outcomes):
        if isinstance(outcome, Exception):
            logger.error("Could not open file: %s (%s)", path, outcome)
            result.files_skipped.append((path, str(outcome)))
            continue

        result.files_read.append(path)
        if not outcome:
            continue
        key = extract_log_type(path.name)
        result.groups.setdefault(key, []).extend(outcome)

    return result
