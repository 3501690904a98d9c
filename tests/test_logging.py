import logging

import pytest

from mock_cursors import MockCursor
from mock_cursors.exceptions import ColumnNotFound
from mock_cursors.utils.general import setup_logger


def test_setup_logger_is_idempotent(tmp_path):
    """Testing that setup_logger() adds a single file handler however many times it's called."""
    log_path = tmp_path / "logs" / "out.log"
    first = setup_logger(str(log_path), "test_setup_logger_is_idempotent")
    second = setup_logger(str(log_path), "test_setup_logger_is_idempotent")

    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is False
    assert log_path.parent.exists()


def test_cursor_writes_debug_and_error_logs(tmp_path):
    """Testing the MockCursor logs when enable_logging=True."""
    log_path = tmp_path / "cursor.log"
    cursor = MockCursor.from_columns(
        ["ID"],
        [[1]],
        enable_logging=True,
        log_file_path=str(log_path),
        logger_name="test_cursor_writes_debug_and_error_logs",
    )

    cursor.next()
    with pytest.raises(ColumnNotFound):
        cursor.get_int("MISSING")

    text = log_path.read_text(encoding="utf-8")
    assert "advance(): Positioned on row 1." in text
    assert "handle(): next()" in text
    assert "_column_name_to_position() failed: ColumnNotFound" in text


def test_min_level_filters_debug(tmp_path):
    """Testing that logger_min_level drops DEBUG records."""
    log_path = tmp_path / "cursor.log"
    cursor = MockCursor.from_columns(
        ["ID"],
        [[1]],
        enable_logging=True,
        log_file_path=str(log_path),
        logger_name="test_min_level_filters_debug",
        logger_min_level=logging.ERROR,
    )
    cursor.next()
    cursor.handle("close")

    assert log_path.read_text(encoding="utf-8") == ""


def test_logging_disabled_by_default(tmp_path, monkeypatch):
    """Testing that no log file is created unless logging is enabled."""
    monkeypatch.chdir(tmp_path)
    cursor = MockCursor.from_columns(["ID"], [[1]])
    cursor.next()

    assert cursor.logger is None
    assert list(tmp_path.iterdir()) == []


class _CountingValue:
    """Counts how often it is rendered."""

    def __init__(self):
        self.renders = 0

    def __str__(self):
        self.renders += 1
        return "value"


@pytest.mark.parametrize("enable_logging", [False, True])
def test_filtered_debug_records_are_not_formatted(tmp_path, enable_logging):
    """Testing that log_debug() arguments aren't rendered when logging is off or DEBUG is filtered out."""
    cursor = MockCursor.from_columns(
        ["ID"],
        [[1]],
        enable_logging=enable_logging,
        log_file_path=str(tmp_path / "cursor.log"),
        logger_name=f"test_filtered_debug_records_are_not_formatted_{enable_logging}",
        logger_min_level=logging.ERROR,
    )
    value = _CountingValue()
    cursor.log_debug("test()", "%s", value)

    assert value.renders == 0
