"""Environment-derived settings for a single run.

Command-line flags stay the primary configuration surface; the few knobs
that make no sense as flags (which backend to load, debug logging) are
read from the environment once, at the start of :func:`main`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv_linter_cli.exceptions import ConfigurationError

BACKEND_ENV: str = "DOTENV_LINTER_BACKEND"
DEBUG_ENV: str = "DOTENV_LINTER_DEBUG"

_FALSY: frozenset[str] = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved environment settings."""

    backend: str | None = None
    """Backend import path (``package.module[:attr]``), if overridden."""

    debug: bool = False
    """Emit DEBUG-level log records."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``).

        Raises
        ------
        ConfigurationError
            If the backend import path has an empty module part.
        """
        env = os.environ if environ is None else environ

        backend = env.get(BACKEND_ENV, "").strip() or None
        if backend is not None and not backend.partition(":")[0].strip():
            raise ConfigurationError(
                f"Invalid {BACKEND_ENV} value: {backend!r}",
                hint="Use the form 'package.module' or 'package.module:object'.",
            )

        debug = env.get(DEBUG_ENV, "").strip().lower() not in _FALSY
        return cls(backend=backend, debug=debug)
