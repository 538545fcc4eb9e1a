# ABOUTME: Tests for the write-once accessible flag and colour capability detection
"""Tests for output mode flags"""

import io

from squash import accessibility, colors


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


class TestAccessibleFlag:
    def test_defaults_to_off(self):
        assert accessibility.is_accessible() is False

    def test_first_set_wins(self):
        assert accessibility.set_accessible(True) is True
        assert accessibility.set_accessible(False) is False
        assert accessibility.is_accessible() is True

    def test_set_off_is_still_a_set(self):
        assert accessibility.set_accessible(False) is True
        assert accessibility.set_accessible(True) is False
        assert accessibility.is_accessible() is False


class TestColorEnabled:
    def test_tty_has_color(self):
        assert colors.color_enabled(FakeTTY()) is True

    def test_pipe_has_no_color(self):
        assert colors.color_enabled(io.StringIO()) is False

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert colors.color_enabled(FakeTTY()) is False

    def test_empty_no_color_is_ignored(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert colors.color_enabled(FakeTTY()) is True

    def test_disable_colors(self):
        colors.disable_colors()
        assert colors.color_enabled(FakeTTY()) is False

    def test_styles_only_when_enabled(self):
        assert colors.red("x", False) == "x"
        assert colors.red("x", True) != "x"
        assert "x" in colors.green("x", True)
