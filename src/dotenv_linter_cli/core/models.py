"""Domain models for dotenv-linter.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access and construction-time normalisation.  They
carry zero I/O and zero dependencies on external packages.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path


# ---------------------------------------------------------------------------
# Command selection
# ---------------------------------------------------------------------------

class Command(enum.Enum):
    """The single path a run takes, decided once from the parsed arguments."""

    CHECK = "check"
    FIX = "fix"
    LIST = "list"
    COMPARE = "compare"
    UNKNOWN = "unknown"


# ---------------------------------------------------------------------------
# Invocation context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Normalised inputs and flags handed to a lint backend for one run.

    ``inputs`` is never empty: when the caller supplies nothing, the
    working directory is used.
    """

    current_dir: Path
    """Process working directory at the start of the run."""

    inputs: tuple[str, ...] = ()
    """Files or directories to operate on, in command-line order."""

    excludes: frozenset[str] = field(default_factory=frozenset)
    """File names to leave out of the scan."""

    skips: frozenset[str] = field(default_factory=frozenset)
    """Check names whose warnings are suppressed."""

    recursive: bool = False
    quiet: bool = False
    no_color: bool = False

    no_backup: bool = False
    """``fix`` only: do not keep a backup of rewritten files."""

    def __post_init__(self) -> None:
        if not self.inputs:
            object.__setattr__(self, "inputs", (str(self.current_dir),))

    @classmethod
    def build(
        cls,
        current_dir: Path,
        *,
        inputs: Iterable[str] | None = None,
        excludes: Iterable[str] | None = None,
        skips: Iterable[str] | None = None,
        recursive: bool = False,
        quiet: bool = False,
        no_color: bool = False,
        no_backup: bool = False,
    ) -> InvocationContext:
        """Build a context from loosely-typed parser values.

        ``None`` stands for "flag not given" and maps to the empty
        default; repeated excludes/skips collapse into sets.
        """
        return cls(
            current_dir=current_dir,
            inputs=tuple(str(item) for item in inputs or ()),
            excludes=frozenset(excludes or ()),
            skips=frozenset(skips or ()),
            recursive=recursive,
            quiet=quiet,
            no_color=no_color,
            no_backup=no_backup,
        )


# ---------------------------------------------------------------------------
# Outcomes, one per router branch
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of the default check path."""

    warning_count: int


@dataclass(frozen=True, slots=True)
class FixOutcome:
    """The fix backend returned without failing."""


@dataclass(frozen=True, slots=True)
class ListOutcome:
    """Check names printed by the ``list`` path."""

    names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CompareOutcome:
    """Warnings reported by the ``compare`` path (possibly empty)."""

    warnings: tuple[object, ...]

    def __bool__(self) -> bool:
        return len(self.warnings) > 0


@dataclass(frozen=True, slots=True)
class UnknownOutcome:
    """An unrecognised subcommand name was given."""

    name: str


Outcome = CheckOutcome | FixOutcome | ListOutcome | CompareOutcome | UnknownOutcome
