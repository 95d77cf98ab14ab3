"""Tests for the domain models (core/models.py)."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from dotenv_linter_cli.core.models import (
    CheckOutcome,
    Command,
    CompareOutcome,
    InvocationContext,
)


class TestInvocationContext:
    def test_defaults(self, tmp_path: Path) -> None:
        ctx = InvocationContext(current_dir=tmp_path)
        assert ctx.inputs == (str(tmp_path),)
        assert ctx.excludes == frozenset()
        assert ctx.skips == frozenset()
        assert not ctx.recursive
        assert not ctx.quiet
        assert not ctx.no_color
        assert not ctx.no_backup

    def test_empty_inputs_fall_back_to_cwd(self, tmp_path: Path) -> None:
        ctx = InvocationContext.build(tmp_path, inputs=[])
        assert ctx.inputs == (str(tmp_path),)

    def test_inputs_keep_order(self, tmp_path: Path) -> None:
        ctx = InvocationContext.build(tmp_path, inputs=["b.env", "a.env", "b.env"])
        assert ctx.inputs == ("b.env", "a.env", "b.env")

    def test_repeated_excludes_and_skips_collapse(self, tmp_path: Path) -> None:
        ctx = InvocationContext.build(
            tmp_path,
            excludes=["x.env", "x.env"],
            skips=["LowercaseKey", "LowercaseKey", "UnorderedKey"],
        )
        assert ctx.excludes == frozenset({"x.env"})
        assert ctx.skips == frozenset({"LowercaseKey", "UnorderedKey"})

    def test_none_means_not_given(self, tmp_path: Path) -> None:
        ctx = InvocationContext.build(tmp_path, inputs=None, excludes=None, skips=None)
        assert ctx.inputs == (str(tmp_path),)
        assert ctx.excludes == frozenset()

    def test_is_frozen(self, tmp_path: Path) -> None:
        ctx = InvocationContext(current_dir=tmp_path)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.quiet = True  # type: ignore[misc]


class TestOutcomes:
    def test_compare_outcome_truthiness(self) -> None:
        assert not CompareOutcome(warnings=())
        assert CompareOutcome(warnings=("mismatch",))

    def test_check_outcome_holds_count(self) -> None:
        assert CheckOutcome(warning_count=4).warning_count == 4

    def test_command_values(self) -> None:
        assert {c.value for c in Command} == {"check", "fix", "list", "compare", "unknown"}
