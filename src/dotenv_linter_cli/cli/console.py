"""Output policy and Rich console construction for the CLI layer.

One :class:`OutputPolicy` exists per run.  It starts with the platform
default (Rich decides: terminal detection, ``NO_COLOR``, Windows
virtual-terminal support) and can only ever be switched to "no color".
Every console the run renders through is built from it, so disabling
color affects all subsequent output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

from dotenv_linter_cli.settings import Settings

_PACKAGE_LOGGER: str = "dotenv_linter_cli"


class OutputPolicy:
    """Write-once color switch shared by all rendering in a run."""

    def __init__(self) -> None:
        self._color_enabled: bool = True
        self._listeners: list[Callable[[], None]] = []

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    def apply(self, no_color: bool) -> None:
        """Disable color when *no_color* is set.

        Idempotent; an unset flag leaves the current state alone, so
        color is never re-enabled once disabled.
        """
        if no_color and self._color_enabled:
            self._color_enabled = False
            for listener in self._listeners:
                listener()

    def on_disable(self, listener: Callable[[], None]) -> None:
        """Call *listener* once, when color gets disabled."""
        self._listeners.append(listener)

    def console(self, *, stderr: bool = False) -> Console:
        """Create a Rich console honouring the current policy.

        With color disabled the console emits no ANSI escape sequences at
        all, styles included.
        """
        color_system: Literal["auto"] | None = "auto" if self._color_enabled else None
        return Console(stderr=stderr, color_system=color_system, highlight=False)


def configure_logging(policy: OutputPolicy, settings: Settings) -> None:
    """Route the package logger through Rich on stderr.

    Log levels:
    - Normal: warnings and errors only
    - Debug (``DOTENV_LINTER_DEBUG=1``): everything, with source paths
    """
    level = logging.DEBUG if settings.debug else logging.WARNING

    handler = RichHandler(
        console=policy.console(stderr=True),
        show_time=False,
        show_path=settings.debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    def _rebind() -> None:
        handler.console = policy.console(stderr=True)

    policy.on_disable(_rebind)

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers = [handler]
    package_logger.propagate = False
