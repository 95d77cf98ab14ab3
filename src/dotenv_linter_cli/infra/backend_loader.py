"""Infrastructure: locate and load the lint backend.

The rule engine, the fixer and the comparison engine live outside this
package.  This module is the **only** place that imports them.  Import
failures are caught here and re-raised as
:class:`~dotenv_linter_cli.exceptions.BackendNotFoundError`.

Resolution order
----------------
1. ``DOTENV_LINTER_BACKEND=package.module[:attr]``.
2. The first entry point (by name) in the ``dotenv_linter.backends`` group.
"""

from __future__ import annotations

import importlib
import logging
from importlib.metadata import EntryPoint, entry_points
from typing import Any

from dotenv_linter_cli.core.protocols import LintBackend
from dotenv_linter_cli.exceptions import BackendNotFoundError
from dotenv_linter_cli.settings import BACKEND_ENV, Settings

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP: str = "dotenv_linter.backends"

REQUIRED_OPERATIONS: tuple[str, ...] = (
    "check",
    "fix",
    "compare",
    "available_check_names",
)

_HINT: str = (
    f"Install a package that registers a '{ENTRY_POINT_GROUP}' entry point, "
    f"or set {BACKEND_ENV}=package.module:object."
)


def load_backend(settings: Settings) -> LintBackend:
    """Resolve, import and validate the lint backend.

    Raises
    ------
    BackendNotFoundError
        When no backend is configured or the configured one is unusable.
    """
    if settings.backend is not None:
        source = f"{BACKEND_ENV}={settings.backend}"
        target = _import_path(settings.backend)
    else:
        entry_point = _first_entry_point()
        if entry_point is None:
            raise BackendNotFoundError("No lint backend is installed.", hint=_HINT)
        source = f"entry point '{entry_point.name}'"
        target = _load_entry_point(entry_point)

    backend = _instantiate(target)
    _validate(backend, source)
    logger.debug("Loaded lint backend from %s", source)
    return backend


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def _import_path(path: str) -> Any:
    """Import ``package.module[:attr]`` and return the named object."""
    module_name, _, attr = path.partition(":")
    try:
        module = importlib.import_module(module_name.strip())
    except ImportError as exc:
        raise BackendNotFoundError(
            f"Cannot import lint backend module '{module_name}': {exc}",
            hint=_HINT,
        ) from exc

    if not attr:
        return module

    target: Any = module
    for part in attr.strip().split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise BackendNotFoundError(
                f"Lint backend module '{module_name}' has no attribute '{attr}'.",
                hint=_HINT,
            ) from exc
    return target


def _first_entry_point() -> EntryPoint | None:
    """Return the registered backend entry point that sorts first, if any."""
    candidates = sorted(entry_points(group=ENTRY_POINT_GROUP), key=lambda ep: ep.name)
    if len(candidates) > 1:
        logger.debug(
            "Several lint backends registered (%s); using '%s'",
            ", ".join(ep.name for ep in candidates),
            candidates[0].name,
        )
    return candidates[0] if candidates else None


def _load_entry_point(entry_point: EntryPoint) -> Any:
    try:
        return entry_point.load()
    except (ImportError, AttributeError) as exc:
        raise BackendNotFoundError(
            f"Cannot load lint backend entry point '{entry_point.name}': {exc}",
            hint=_HINT,
        ) from exc


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _instantiate(target: Any) -> Any:
    """Classes are instantiated without arguments; anything else is used as is."""
    if isinstance(target, type):
        return target()
    return target


def _validate(backend: Any, source: str) -> None:
    missing = [
        name for name in REQUIRED_OPERATIONS
        if not callable(getattr(backend, name, None))
    ]
    if missing:
        raise BackendNotFoundError(
            f"Lint backend from {source} does not provide: {', '.join(missing)}",
            hint=_HINT,
        )
