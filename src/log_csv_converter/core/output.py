"""Output directory selection and CSV writing."""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles

from .config import DEFAULT_OUTPUT_NAME
from .csv_escape import CSV_HEADER, format_csv_row
from .models import LogGroups, LogRecord
from .report import OutputFileSummary

logger = logging.getLogger(__name__)

EMPTY_LOG_TYPE_NAME = "unknown"


def _candidate(root: Path, name: str, n: int) -> Path:
    return root / (name if n == 0 else f"{name}({n})")


def resolve_output_dir(root: str | Path, name: str = DEFAULT_OUTPUT_NAME) -> Path:
    """Pick 'name', or 'name(N)' for the smallest N >= 1 not already taken."""
    root = Path(root)
    n = 0
    while _candidate(root, name, n).exists():
        n += 1
    return _candidate(root, name, n)


def create_output_dir(root: str | Path, name: str = DEFAULT_OUTPUT_NAME) -> Path:
    """Create and return a fresh output directory; never reuses an existing one."""
    while True:
        path = resolve_output_dir(root, name)
        try:
            path.mkdir(parents=True)
        except FileExistsError:
            # lost a race with another process; try the next suffix
            continue
        return path


def csv_file_name(log_type: str) -> str:
    return f"{log_type or EMPTY_LOG_TYPE_NAME}.csv"


async def write_csv(path: Path, records: list[LogRecord], *, encoding: str = "utf-8") -> None:
    """Write header plus one escaped row per record. Raises OSError on failure."""
    async with aiofiles.open(path, "w", encoding=encoding, newline="") as f:
        await f.write(CSV_HEADER + "\n")
        for record in records:
            await f.write(format_csv_row(record.csv_fields()) + "\n")


async def write_groups(
    groups: LogGroups,
    output_dir: Path,
) -> list[OutputFileSummary]:
    """Write one CSV per log type; failures are logged and reported, not raised."""
    summaries: list[OutputFileSummary] = []

    for log_type, records in groups.items():
        path = output_dir / csv_file_name(log_type)
        try:
            await write_csv(path, records)
        except OSError as exc:
            logger.error("Could not create output file: %s (%s)", path, exc)
            summaries.append(
                OutputFileSummary(log_type=log_type, path=str(path), records=0, error=str(exc))
            )
            continue
        summaries.append(OutputFileSummary(log_type=log_type, path=str(path), records=len(records)))

    return summaries
