"""Core linter service — the error boundary around a lint backend.

This service delegates every operation to a
:class:`~dotenv_linter_cli.core.protocols.LintBackend` injected at
construction time.  It is responsible for:

* Forwarding the invocation context unchanged.
* Normalising return values into immutable sequences.
* Ensuring only :class:`~dotenv_linter_cli.exceptions.DotenvLinterError`
  subclasses escape, with the backend's own message preserved.

Guarantees
----------
* Pure orchestration: no ``print()``, no file-system access of its own.
* Nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from dotenv_linter_cli.core.models import InvocationContext
from dotenv_linter_cli.core.protocols import LintBackend
from dotenv_linter_cli.exceptions import DotenvLinterError, OperationError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class LinterService:
    """Stateless service that drives one lint backend.

    Parameters
    ----------
    backend:
        Any object satisfying the :class:`LintBackend` protocol.
    """

    def __init__(self, backend: LintBackend) -> None:
        self._backend: LintBackend = backend

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self, context: InvocationContext) -> int:
        """Run the checks and return the total warning count.

        Raises
        ------
        OperationError
            When the backend fails for any reason.
        """
        return int(self._call("check", lambda: self._backend.check(context)))

    def fix(self, context: InvocationContext) -> None:
        """Run the auto-fixer.

        Raises
        ------
        OperationError
            When the backend fails for any reason.
        """
        self._call("fix", lambda: self._backend.fix(context))

    def compare(self, context: InvocationContext) -> tuple[object, ...]:
        """Compare the keys of the input files and return the warnings.

        Raises
        ------
        OperationError
            When the backend fails for any reason.
        """
        return tuple(self._call("compare", lambda: self._backend.compare(context)))

    def available_check_names(self) -> tuple[str, ...]:
        """Return the backend's check names, order preserved."""
        names = self._call(
            "available_check_names",
            self._backend.available_check_names,
        )
        return tuple(str(name) for name in names)

    # ------------------------------------------------------------------
    # Backend delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _call(operation: str, func: Callable[[], _T]) -> _T:
        """Invoke *func* and ensure only our exceptions escape."""
        logger.debug("Calling backend operation %s", operation)
        try:
            return func()
        except DotenvLinterError:
            # Already one of ours, propagate unchanged.
            raise
        except Exception as exc:
            raise OperationError(str(exc) or type(exc).__name__) from exc
