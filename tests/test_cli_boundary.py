"""Tests for the script-level error boundary (cli/app.py ``cli``)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from dotenv_linter_cli.cli import exit_codes
from dotenv_linter_cli.cli.app import cli


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr("sys.argv", ["dotenv-linter", *argv])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    return exc_info.value.code


class TestErrorBoundary:
    def test_usage_error(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = _run(monkeypatch, "compare", "only-one.env")
        assert code == exit_codes.USAGE_ERROR
        err = capsys.readouterr().err
        assert "usage:" in err
        assert "dotenv-linter compare <files>..." in err

    @patch("dotenv_linter_cli.infra.backend_loader.entry_points", return_value=[])
    def test_operation_error_shows_hint(
        self,
        _mock_eps: MagicMock,
        workdir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run(monkeypatch, "list")
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Hint:" in err

    def test_unknown_command(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert _run(monkeypatch, "bogus") == exit_codes.GENERAL_ERROR
        assert "unknown command" in capsys.readouterr().err

    @patch("dotenv_linter_cli.cli.app.main", return_value=exit_codes.SUCCESS)
    def test_success(self, _mock_main: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
        assert _run(monkeypatch) == exit_codes.SUCCESS

    @patch("dotenv_linter_cli.cli.app.main", side_effect=KeyboardInterrupt)
    def test_keyboard_interrupt(self, _mock_main: MagicMock, monkeypatch: pytest.MonkeyPatch) -> None:
        assert _run(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    @patch("dotenv_linter_cli.cli.app.main", side_effect=RuntimeError("kaboom [x]"))
    def test_unexpected_error(
        self,
        _mock_main: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        err = capsys.readouterr().err
        assert "RuntimeError" in err
        assert "kaboom [x]" in err
