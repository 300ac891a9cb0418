import pytest

from arenalegends.log import LogType, log, set_config


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "log.txt"
    yield path
    set_config(False, False, str(tmp_path / "reset.txt"))


def test_disabled_logger_writes_nothing(log_file, capsys):
    set_config(False, False, str(log_file))
    log(LogType.INFO, "hello")
    assert capsys.readouterr().out == ""
    assert log_file.read_text() == ""


def test_enabled_logger_writes_label_and_parts(log_file, capsys):
    set_config(True, False, str(log_file))
    log(LogType.INFO, "Changed to ", "play", " scene")
    expected = "[INFO] Changed to play scene\n"
    assert capsys.readouterr().out == expected
    assert log_file.read_text() == expected


def test_error_label(log_file, capsys):
    set_config(True, False, str(log_file))
    log(LogType.ERROR, "boom")
    assert capsys.readouterr().out.startswith("[ERROR] ")


def test_verbose_suppressed_unless_requested(log_file, capsys):
    set_config(True, False, str(log_file))
    log(LogType.VERBOSE, "frame")
    assert capsys.readouterr().out == ""
    set_config(True, True, str(log_file))
    log(LogType.VERBOSE, "frame")
    assert capsys.readouterr().out == "[VERBOSE] frame\n"


def test_lines_are_appended(log_file):
    set_config(True, False, str(log_file))
    log(LogType.WARN, "a")
    log(LogType.DEBUGGING, "b")
    assert log_file.read_text().splitlines() == ["[WARN] a", "[DEBUGGING] b"]


def test_set_config_clears_file(log_file):
    set_config(True, False, str(log_file))
    log(LogType.INFO, "old")
    set_config(True, False, str(log_file))
    assert log_file.read_text() == ""