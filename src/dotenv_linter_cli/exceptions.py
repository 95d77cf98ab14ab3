"""Custom exception hierarchy for dotenv-linter.

All exceptions that cross layer boundaries must inherit from
:class:`DotenvLinterError`.  Raw exceptions raised by a lint backend
(``OSError`` and friends) must NEVER propagate beyond
:class:`~dotenv_linter_cli.core.linter_service.LinterService`; they are
re-raised there as :class:`OperationError` with the original message.

Hierarchy
---------
DotenvLinterError
├── UsageError
├── OperationError
│   └── BackendNotFoundError
└── ConfigurationError
"""

from __future__ import annotations


class DotenvLinterError(Exception):
    """Base exception for all dotenv-linter errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument parsing ------------------------------------------------------

class UsageError(DotenvLinterError):
    """Raised when the command line does not match the argument schema.

    Reported before any lint operation runs.
    """

    def __init__(
        self,
        message: str,
        *,
        usage: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.usage: str = usage
        """Usage line of the parser that rejected the arguments."""


# --- Lint operations -------------------------------------------------------

class OperationError(DotenvLinterError):
    """Raised when a lint operation (check, fix, compare) fails."""


class BackendNotFoundError(OperationError):
    """Raised when no usable lint backend can be loaded."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(DotenvLinterError):
    """Raised when an environment setting holds an invalid value."""
