"""Protocols (interfaces) consumed by the core layer.

These define the contract a lint backend must satisfy.  Core and CLI
code depend ONLY on this protocol, never on a concrete backend, so the
rule engine, the fixer and the comparison engine stay pluggable.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from dotenv_linter_cli.core.models import InvocationContext


class LintBackend(Protocol):
    """Contract for lint backends.

    Any object (class instance or module) that exposes these four
    callables satisfies the protocol structurally.
    """

    def check(self, context: InvocationContext) -> int:
        """Lint every file selected by *context* and report the warnings.

        Returns
        -------
        int
            Total number of warnings found.
        """
        ...  # pragma: no cover

    def fix(self, context: InvocationContext) -> None:
        """Rewrite the files selected by *context* in place.

        Backups are kept unless ``context.no_backup`` is set.
        """
        ...  # pragma: no cover

    def compare(self, context: InvocationContext) -> Sequence[object]:
        """Compare the keys of ``context.inputs`` and return mismatch warnings."""
        ...  # pragma: no cover

    def available_check_names(self) -> Sequence[str]:
        """Return every check name in a stable, meaningful order.

        Must not fail and must not touch the file system.
        """
        ...  # pragma: no cover
