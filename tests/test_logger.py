"""Tests for the leveled terminal logger."""

import pytest

from wcaglab.core.contrast import adjust_color_for_contrast
from wcaglab.core.parser import parse_color
from wcaglab.core.types import RGB
from wcaglab.shared.logger import get_log_level, log, set_log_level


@pytest.fixture(autouse=True)
def _isolated_level(restore_log_level):
    yield


def test_info_goes_to_stdout_and_errors_to_stderr(capsys):
    set_log_level("info")
    log("info", "hello")
    log("error", "broken")
    out, err = capsys.readouterr()
    assert "[wcaglab][info]" in out and "hello" in out
    assert "[wcaglab][error]" in err and "broken" in err


def test_messages_below_threshold_are_dropped(capsys):
    set_log_level("warning")
    log("debug", "quiet")
    log("info", "quiet too")
    out, err = capsys.readouterr()
    assert out == ""
    assert err == ""


def test_set_log_level_is_case_insensitive():
    set_log_level("DEBUG")
    assert get_log_level() == 10


def test_unknown_level_is_rejected():
    with pytest.raises(ValueError):
        set_log_level("loud")


def test_unparseable_color_is_logged_at_debug(capsys):
    set_log_level("debug")
    parse_color("not\na color")
    _, err = capsys.readouterr()
    assert "unparseable color 'not a color'" in err


def test_unreachable_adjustment_is_logged_at_debug(capsys):
    set_log_level("debug")
    gray = RGB(128, 128, 128)
    adjust_color_for_contrast(gray, gray, 21.0)
    _, err = capsys.readouterr()
    assert "unreachable" in err
