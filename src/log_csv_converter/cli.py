from __future__ import annotations

import argparse
import asyncio
import codecs
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from log_csv_converter.core.config import DEFAULT_INPUT_DIR, ConverterConfig, resolve_converter_config
from log_csv_converter.core.converter import convert_directory

LOGGER = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr; level from LOG_CSV_LOG_LEVEL unless --verbose."""
    level_name = "DEBUG" if verbose else os.getenv("LOG_CSV_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("must be an integer") from e
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _build_config(args: argparse.Namespace) -> ConverterConfig:
    """Env overrides first, then explicit flags on top."""
    cfg = resolve_converter_config()
    overrides: dict[str, object] = {}
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    if args.encoding is not None:
        try:
            codecs.lookup(args.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {args.encoding}") from e
        overrides["encoding"] = args.encoding
    if args.include_rotated:
        overrides["include_rotated"] = True
    return replace(cfg, **overrides) if overrides else cfg


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="log-csv-converter",
        description="Convert a folder of device/system logs into one CSV per log type.",
    )
    p.add_argument(
        "input_dir",
        nargs="?",
        default=None,
        help=f"Folder holding .log/.txt files (default: ./{DEFAULT_INPUT_DIR})",
    )
    p.add_argument(
        "--output-root",
        type=Path,
        default=Path("."),
        help="Where the 'output' folder is created (default: current directory)",
    )
    p.add_argument("--workers", type=_positive_int, default=None, help="Files read concurrently (default: 1)")
    p.add_argument("--encoding", default=None, help="Input text encoding (default: utf-8)")
    p.add_argument(
        "--include-rotated",
        action="store_true",
        help="Also read rotated files such as syslog.log.1",
    )
    p.add_argument("--report", type=Path, default=None, help="Write a JSON run report to this path")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if args.input_dir is None:
        input_dir = Path.cwd() / DEFAULT_INPUT_DIR
        LOGGER.info("No folder argument provided. Defaulting to: %s", input_dir)
    else:
        input_dir = Path(args.input_dir)

    try:
        cfg = _build_config(args)
        report = asyncio.run(convert_directory(input_dir, output_root=args.output_root, cfg=cfg))
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)

    print(f"Output folder: {report.output_dir}")
    for out in report.outputs:
        if out.error is None:
            print(f"Wrote {out.records} entries to {out.path}")

    if args.report is not None:
        try:
            args.report.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            LOGGER.error("Could not write report %s: %s", args.report, e)

    print("Processing complete.")


if __name__ == "__main__":
    main()
