"""Converter configuration and environment overrides."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace

DEFAULT_INPUT_DIR = "syslog"
DEFAULT_OUTPUT_NAME = "output"


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    encoding: str = "utf-8"
    decode_errors: str = "replace"

    # Files read concurrently; 1 means strictly sequential.
    max_workers: int = 1

    extensions: tuple[str, ...] = (".log", ".txt")
    # Also pick up rotated names like 'syslog.log.3'.
    include_rotated: bool = False

    output_name: str = DEFAULT_OUTPUT_NAME


def _env_max_workers() -> int | None:
    env = os.getenv("LOG_CSV_MAX_WORKERS")
    if env is None or env == "":
        return None
    try:
        value = int(env)
    except ValueError as exc:
        raise ValueError("LOG_CSV_MAX_WORKERS must be an integer") from exc
    if value < 1:
        raise ValueError("LOG_CSV_MAX_WORKERS must be >= 1")
    return value


def resolve_converter_config(cfg: ConverterConfig | None = None) -> ConverterConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = ConverterConfig()

    overrides: dict[str, object] = {}
    workers = _env_max_workers()
    if workers is not None:
        overrides["max_workers"] = workers
    encoding = os.getenv("LOG_CSV_ENCODING")
    if encoding:
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"LOG_CSV_ENCODING is not a known encoding: {encoding}") from exc
        overrides["encoding"] = encoding

    if not overrides:
        return cfg
    return replace(cfg, **overrides)
