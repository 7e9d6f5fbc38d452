from __future__ import annotations

import pytest

from log_csv_converter.core.log_types import extract_log_type


@pytest.mark.parametrize("name", ["syslog.log", "syslog.log.1", "SYSLOG.LOG.23", "syslog2.log"])
def test_rotated_and_numbered_files_share_a_key(name: str) -> None:
    assert extract_log_type(name) == "syslog"


def test_name_without_log_marker_is_kept() -> None:
    assert extract_log_type("Fota.txt") == "fota.txt"


def test_trailing_digits_are_stripped_without_marker() -> None:
    assert extract_log_type("boot12") == "boot"


def test_all_digit_name_gives_empty_key() -> None:
    assert extract_log_type("123.log") == ""
    assert extract_log_type(".log") == ""


def test_marker_position_survives_case_folding_that_changes_length() -> None:
    assert extract_log_type("İmage.log.2") == "İmage".lower()
    assert extract_log_type("İmage.log") == extract_log_type("İmage.log.2")
