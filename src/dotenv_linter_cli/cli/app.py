"""CLI application entry point and command routing for dotenv-linter.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dotenv_linter_cli.exceptions.DotenvLinterError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No lint logic lives here; all work is delegated to the backend
  through :class:`~dotenv_linter_cli.core.linter_service.LinterService`.
* Every routing branch returns a typed outcome; only :func:`cli`
  terminates the process.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.markup import escape

from dotenv_linter_cli.cli import exit_codes
from dotenv_linter_cli.cli.console import OutputPolicy, configure_logging
from dotenv_linter_cli.cli.schema import ParsedInvocation, parse_invocation
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
from dotenv_linter_cli.exceptions import DotenvLinterError, UsageError
from dotenv_linter_cli.infra.backend_loader import load_backend
from dotenv_linter_cli.settings import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Invocation context construction
# ---------------------------------------------------------------------------

def _scan_context(
    args: argparse.Namespace,
    current_dir: Path,
    policy: OutputPolicy,
    *,
    no_backup: bool = False,
) -> InvocationContext:
    """Context for the rule-based paths (check and fix)."""
    return InvocationContext.build(
        current_dir,
        inputs=args.input,
        excludes=args.exclude,
        skips=args.skip,
        recursive=args.recursive,
        quiet=args.quiet,
        no_color=not policy.color_enabled,
        no_backup=no_backup,
    )


def _compare_context(
    args: argparse.Namespace,
    current_dir: Path,
    policy: OutputPolicy,
) -> InvocationContext:
    """Context for ``compare``: inputs, color and quiet only."""
    return InvocationContext.build(
        current_dir,
        inputs=args.input,
        quiet=args.quiet,
        no_color=not policy.color_enabled,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _sub_matches(invocation: ParsedInvocation) -> argparse.Namespace:
    if invocation.sub is None:
        raise TypeError(f"{invocation.command.value} invocation carries no subcommand matches")
    return invocation.sub


def route(
    invocation: ParsedInvocation,
    *,
    policy: OutputPolicy,
    current_dir: Path,
    service: Callable[[], LinterService],
) -> Outcome:
    """Run exactly one command path and return its outcome.

    *service* is called only on paths that need the backend, so an
    unknown command never loads it.
    """
    command = invocation.command
    logger.debug("Routing command %s", command.value)

    if command is Command.CHECK:
        context = _scan_context(invocation.root, current_dir, policy)
        return CheckOutcome(warning_count=service().check(context))

    if command is Command.FIX:
        sub = _sub_matches(invocation)
        policy.apply(sub.no_color)
        context = _scan_context(sub, current_dir, policy, no_backup=sub.no_backup)
        service().fix(context)
        return FixOutcome()

    if command is Command.LIST:
        names = service().available_check_names()
        out = policy.console()
        for name in names:
            out.print(name, markup=False, emoji=False, soft_wrap=True)
        return ListOutcome(names=names)

    if command is Command.COMPARE:
        sub = _sub_matches(invocation)
        # Read independently of the root flag.
        policy.apply(sub.no_color)
        context = _compare_context(sub, current_dir, policy)
        return CompareOutcome(warnings=service().compare(context))

    policy.console(stderr=True).print("unknown command", markup=False)
    return UnknownOutcome(name=invocation.name or "")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    backend: LintBackend | None = None,
    current_dir: Path | None = None,
    policy: OutputPolicy | None = None,
) -> int:
    """Run the dotenv-linter CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    backend:
        Lint backend to use instead of the configured one.
    current_dir:
        Working directory that inputs default to.  Defaults to
        :meth:`Path.cwd`.
    policy:
        Output policy for this run.  A fresh one is created when omitted.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        When the arguments do not match the schema; nothing has run yet.
    """
    cwd = current_dir if current_dir is not None else Path.cwd()
    invocation = parse_invocation(sys.argv[1:] if argv is None else argv, cwd)

    if policy is None:
        policy = OutputPolicy()
    policy.apply(invocation.root.no_color)

    settings = Settings.from_env()
    configure_logging(policy, settings)

    def _service() -> LinterService:
        return LinterService(backend if backend is not None else load_backend(settings))

    outcome = route(invocation, policy=policy, current_dir=cwd, service=_service)
    return exit_codes.decide(outcome)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    policy = OutputPolicy()
    try:
        code = main(policy=policy)
        sys.exit(code)
    except UsageError as exc:
        console = policy.console(stderr=True)
        console.print(exc.usage.rstrip(), markup=False)
        console.print(f"[bold red]error:[/bold red] {escape(str(exc))}")
        sys.exit(exit_codes.USAGE_ERROR)
    except DotenvLinterError as exc:
        console = policy.console(stderr=True)
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        policy.console(stderr=True).print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        policy.console(stderr=True).print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
