"""Exit-code constants and the outcome → exit-code mapping.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

from dotenv_linter_cli.core.models import (
    CheckOutcome,
    CompareOutcome,
    FixOutcome,
    ListOutcome,
    Outcome,
    UnknownOutcome,
)

SUCCESS: int = 0
"""Clean exit: no warnings found, fix applied, or names listed."""

WARNINGS_FOUND: int = 1
"""Check found warnings, or compared files do not share the same keys."""

GENERAL_ERROR: int = 1
"""Unknown command, or a known DotenvLinterError was caught."""

USAGE_ERROR: int = 2
"""The command line did not match the argument schema."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""


def decide(outcome: Outcome) -> int:
    """Translate a router outcome into the process exit code."""
    if isinstance(outcome, CheckOutcome):
        return SUCCESS if outcome.warning_count == 0 else WARNINGS_FOUND
    if isinstance(outcome, (FixOutcome, ListOutcome)):
        return SUCCESS
    if isinstance(outcome, CompareOutcome):
        return WARNINGS_FOUND if outcome else SUCCESS
    if isinstance(outcome, UnknownOutcome):
        return GENERAL_ERROR
    raise TypeError(f"Unsupported outcome: {outcome!r}")
