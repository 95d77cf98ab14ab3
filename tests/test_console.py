"""Tests for the output policy and logging setup (cli/console.py)."""

from __future__ import annotations

import logging

import pytest

from dotenv_linter_cli.cli.console import OutputPolicy, configure_logging
from dotenv_linter_cli.settings import Settings


@pytest.fixture
def forced_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make Rich believe it writes to a color terminal."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("TERM", "xterm-256color")


class TestOutputPolicy:
    def test_color_enabled_by_default(self) -> None:
        assert OutputPolicy().color_enabled

    def test_apply_without_flag_keeps_default(self) -> None:
        policy = OutputPolicy()
        policy.apply(False)
        assert policy.color_enabled

    def test_apply_is_idempotent(self) -> None:
        policy = OutputPolicy()
        policy.apply(True)
        policy.apply(True)
        assert not policy.color_enabled

    def test_never_re_enabled(self) -> None:
        policy = OutputPolicy()
        policy.apply(True)
        policy.apply(False)
        assert not policy.color_enabled

    def test_listener_called_once(self) -> None:
        policy = OutputPolicy()
        calls: list[int] = []
        policy.on_disable(lambda: calls.append(1))
        policy.apply(True)
        policy.apply(True)
        assert calls == [1]

    def test_disabled_console_emits_no_ansi(
        self, forced_terminal: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        policy = OutputPolicy()
        policy.apply(True)
        policy.console().print("[bold red]LowercaseKey[/bold red]")
        out = capsys.readouterr().out
        assert "LowercaseKey" in out
        assert "\x1b[" not in out

    def test_enabled_console_keeps_platform_default(
        self, forced_terminal: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        OutputPolicy().console().print("[red]LowercaseKey[/red]")
        assert "\x1b[" in capsys.readouterr().out

    def test_stderr_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        OutputPolicy().console(stderr=True).print("oops")
        captured = capsys.readouterr()
        assert "oops" in captured.err
        assert captured.out == ""


class TestConfigureLogging:
    def test_default_level_is_warning(self) -> None:
        configure_logging(OutputPolicy(), Settings())
        assert logging.getLogger("dotenv_linter_cli").level == logging.WARNING

    def test_debug_level(self) -> None:
        configure_logging(OutputPolicy(), Settings(debug=True))
        assert logging.getLogger("dotenv_linter_cli").level == logging.DEBUG

    def test_handler_follows_policy(self) -> None:
        policy = OutputPolicy()
        configure_logging(policy, Settings())
        (handler,) = logging.getLogger("dotenv_linter_cli").handlers
        before = handler.console
        policy.apply(True)
        assert handler.console is not before
        assert handler.console.color_system is None

    def test_reconfiguring_replaces_handler(self) -> None:
        configure_logging(OutputPolicy(), Settings())
        configure_logging(OutputPolicy(), Settings())
        assert len(logging.getLogger("dotenv_linter_cli").handlers) == 1
