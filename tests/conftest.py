from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

CM_LINES = [
    "[02/19 01:15:01][CM][INFO][MSTC_MI]checkRecovery(338)enableRadio=1",
    "",
    "[02/19 1:15:2][CM][WARN]link down, retrying",
]

SYSLOG_LINES = [
    "Feb 19 01:55:01 user.info zcmdModuleCfg: Enter function zcmdReqObjGet Oid 154176",
    "[cellwan] Feb 14 2:20:11 user.notice DALCMD: Attached to schema shared memory",
    "random garbage text",
]

FOTA_LINES = [
    "[INFO] [FOTA] Get CPE IMEI info Success.",
    "[12/31 18:35:49]",
]


@pytest.fixture
def write_lines() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    return _write


@pytest.fixture
def log_dir(tmp_path: Path, write_lines) -> Path:
    """A folder of mixed device logs, plus files the converter must ignore."""
    root = tmp_path / "syslog"
    root.mkdir()
    write_lines(root / "cm.log", CM_LINES)
    write_lines(root / "syslog.log", SYSLOG_LINES)
    write_lines(root / "syslog.log.1", ["Feb 18 23:59:59 kern.info kernel: rotated"])
    write_lines(root / "fota.txt", FOTA_LINES)
    write_lines(root / "notes.md", ["not a log"])
    (root / "nested.log").mkdir()
    return root
