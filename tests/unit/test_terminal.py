"""Unit tests for terminal width detection and resolution."""

import pytest

from ccstatusline.utils import terminal
from ccstatusline.utils.terminal import (
    DEFAULT_TERMINAL_WIDTH,
    detect_terminal_width,
    resolve_width,
)


@pytest.mark.unit
class TestResolveWidth:
    """Tests for resolve_width flex modes."""

    def test_full(self):
        assert resolve_width("full", 120) == 120

    def test_full_minus_40(self):
        assert resolve_width("full-minus-40", 120) == 80

    def test_full_minus_40_clamped(self):
        assert resolve_width("full-minus-40", 30) == 0

    def test_full_until_compact_below_threshold(self):
        assert resolve_width("full-until-compact", 120, 59.9, 60.0) == 120

    def test_full_until_compact_at_threshold(self):
        assert resolve_width("full-until-compact", 120, 60.0, 60.0) == 80

    def test_full_until_compact_without_usage(self):
        assert resolve_width("full-until-compact", 120, None) == 120

    def test_unknown_width_uses_default(self):
        assert resolve_width("full", None) == DEFAULT_TERMINAL_WIDTH
        assert resolve_width("full-minus-40", None) == DEFAULT_TERMINAL_WIDTH - 40


@pytest.mark.unit
class TestDetectTerminalWidth:
    """Tests for detect_terminal_width."""

    def test_columns_env_var(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "132")
        assert detect_terminal_width() == 132

    def test_invalid_columns_ignored(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "wide")
        monkeypatch.setattr(terminal, "_width_from_fd", lambda fd: 99)
        monkeypatch.setattr(terminal.os, "open", lambda *args: 3)
        monkeypatch.setattr(terminal.os, "close", lambda fd: None)
        assert detect_terminal_width() == 99

    def test_undetectable(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        monkeypatch.setattr(terminal, "_width_from_fd", lambda fd: None)

        def _no_tty(*args, **kwargs):
            raise OSError("no controlling terminal")

        monkeypatch.setattr(terminal.os, "open", _no_tty)
        assert detect_terminal_width() is None
