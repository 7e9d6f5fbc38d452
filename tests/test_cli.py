from __future__ import annotations

import json
from pathlib import Path

import pytest

from log_csv_converter.cli import main


def test_cli_converts_folder(tmp_path: Path, log_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main([str(log_dir), "--output-root", str(tmp_path)])

    out = capsys.readouterr().out
    assert "Wrote 2 entries to" in out
    assert "Wrote 3 entries to" in out
    assert out.rstrip().endswith("Processing complete.")

    cm_csv = (tmp_path / "output" / "cm.csv").read_text(encoding="utf-8").splitlines()
    assert cm_csv[0] == "Timestamp,Source,Log Level,Message,File"
    assert cm_csv[1] == "02/19 01:15:01,CM,INFO,[MSTC_MI]checkRecovery(338)enableRadio=1,cm.log"
    assert cm_csv[2] == '02/19 01:15:02,CM,WARN,"link down, retrying",cm.log'


def test_cli_invalid_folder_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing"), "--output-root", str(tmp_path)])

    assert exc.value.code == 1
    assert "is not a valid folder" in capsys.readouterr().err
    assert not (tmp_path / "output").exists()


def test_cli_file_instead_of_folder_exits_1(tmp_path: Path) -> None:
    path = tmp_path / "one.log"
    path.write_text("x\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main([str(path), "--output-root", str(tmp_path)])

    assert exc.value.code == 1


def test_cli_defaults_to_syslog_folder(
    tmp_path: Path, log_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    assert log_dir == tmp_path / "syslog"
    monkeypatch.chdir(tmp_path)

    main([])

    assert (tmp_path / "output" / "syslog.csv").is_file()


def test_cli_empty_folder_completes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()

    main([str(empty), "--output-root", str(tmp_path)])

    assert "Processing complete." in capsys.readouterr().out
    assert list((tmp_path / "output").iterdir()) == []


def test_cli_writes_report(tmp_path: Path, log_dir: Path) -> None:
    report_path = tmp_path / "report.json"

    main([str(log_dir), "--output-root", str(tmp_path), "--workers", "3", "--report", str(report_path)])

    data = json.loads(report_path.read_text(encoding="utf-8"))
    assert data["output_dir"] == str(tmp_path / "output")
    assert {o["log_type"] for o in data["outputs"]} == {"cm", "fota.txt", "syslog"}


def test_cli_rejects_zero_workers(tmp_path: Path, log_dir: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main([str(log_dir), "--workers", "0"])

    assert exc.value.code == 2


def test_cli_invalid_env_workers_exits_1(
    tmp_path: Path, log_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LOG_CSV_MAX_WORKERS", "zero")

    with pytest.raises(SystemExit) as exc:
        main([str(log_dir), "--output-root", str(tmp_path)])

    assert exc.value.code == 1


def test_cli_unknown_encoding_exits_1(tmp_path: Path, log_dir: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main([str(log_dir), "--output-root", str(tmp_path), "--encoding", "no-such-codec"])

    assert exc.value.code == 1
    assert not (tmp_path / "output").exists()
