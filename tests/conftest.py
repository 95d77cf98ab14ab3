"""Shared pytest fixtures and configuration for the dotenv-linter test suite.

Guidelines
----------
* The lint backend is always faked — no real rule engine is loaded.
* File-system use is limited to ``tmp_path``.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from dotenv_linter_cli.core.models import InvocationContext


class FakeBackend:
    """In-memory lint backend that records every call."""

    def __init__(
        self,
        *,
        warning_count: int = 0,
        compare_warnings: Sequence[object] = (),
        names: Sequence[str] = ("DuplicatedKey", "LowercaseKey", "UnorderedKey"),
        error: Exception | None = None,
    ) -> None:
        self.warning_count = warning_count
        self.compare_warnings = compare_warnings
        self.names = names
        self.error = error
        self.calls: list[tuple[str, InvocationContext | None]] = []

    def _record(self, operation: str, context: InvocationContext | None) -> None:
        self.calls.append((operation, context))
        if self.error is not None:
            raise self.error

    def check(self, context: InvocationContext) -> int:
        self._record("check", context)
        return self.warning_count

    def fix(self, context: InvocationContext) -> None:
        self._record("fix", context)

    def compare(self, context: InvocationContext) -> Sequence[object]:
        self._record("compare", context)
        return self.compare_warnings

    def available_check_names(self) -> Sequence[str]:
        self._record("available_check_names", None)
        return self.names


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DOTENV_LINTER_BACKEND", "DOTENV_LINTER_DEBUG", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fresh, empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_backend() -> type[FakeBackend]:
    return FakeBackend
