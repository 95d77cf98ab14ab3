"""Core / service layer — domain models and the backend boundary.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from dotenv_linter_cli.core.linter_service import LinterService
from dotenv_linter_cli.core.models import (
    CheckOutcome,
    Command,
    CompareOutcome,
    FixOutcome,
    InvocationContext,
    ListOutcome,
    Outcome,
    UnknownOutcome,
)
from dotenv_linter_cli.core.protocols import LintBackend

__all__: list[str] = [
    "CheckOutcome",
    "Command",
    "CompareOutcome",
    "FixOutcome",
    "InvocationContext",
    "LintBackend",
    "LinterService",
    "ListOutcome",
    "Outcome",
    "UnknownOutcome",
]
