import pytest

from gemesis.log import GameError, log_assert, log_error, log_info, log_warn


def test_log_info_writes_to_stderr(capsys):
    log_info("hello there")
    captured = capsys.readouterr()
    assert "Info" in captured.err
    assert captured.err.rstrip().endswith("hello there")
    assert captured.out == ""


def test_log_warn_writes_to_stderr(capsys):
    log_warn("careful")
    captured = capsys.readouterr()
    assert "Warn" in captured.err
    assert "careful" in captured.err


def test_log_error_raises(capsys):
    with pytest.raises(GameError, match="broken"):
        log_error("broken")
    assert "Error" in capsys.readouterr().err


def test_log_assert_passes_silently(capsys):
    log_assert(True, "never shown")
    assert capsys.readouterr().err == ""


def test_log_assert_fails_with_message():
    with pytest.raises(GameError, match="!EQ"):
        log_assert(False, "!EQ")


def test_log_assert_default_message():
    with pytest.raises(GameError, match="Assert Failed!"):
        log_assert(False)