"""End-to-end directory conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import ConverterConfig, resolve_converter_config
from .formats import LineParser
from .log_service import collect_groups, discover_log_files, validate_input_dir
from .output import create_output_dir, write_groups
from .report import ConversionReport, SkippedFile

logger = logging.getLogger(__name__)


async def convert_directory(
    input_dir: str | Path,
    *,
    output_root: str | Path = ".",
    cfg: ConverterConfig | None = None,
    parser: LineParser | None = None,
) -> ConversionReport:
    """Convert every log file in input_dir into per-type CSVs.

    The input directory is validated before anything is written, so an
    invalid path (FileNotFoundError / NotADirectoryError) leaves no output.
    """
    cfg = cfg or resolve_converter_config()
    input_path = validate_input_dir(input_dir)

    paths = discover_log_files(input_path, cfg)
    logger.debug("Found %d log files in %s", len(paths), input_path)
    result = await collect_groups(paths, cfg=cfg, parser=parser)

    output_dir = create_output_dir(output_root, cfg.output_name)
    logger.debug("Output folder: %s", output_dir)
    outputs = await write_groups(result.groups, output_dir)

    return ConversionReport(
        input_dir=str(input_path),
        output_dir=str(output_dir),
        files_read=[str(p) for p in result.files_read],
        files_skipped=[SkippedFile(path=str(p), error=err) for p, err in result.files_skipped],
        outputs=outputs,
        pattern_counts=result.pattern_counts(),
    )
