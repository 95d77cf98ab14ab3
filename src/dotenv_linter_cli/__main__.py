"""Allow ``python -m dotenv_linter_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m dotenv_linter_cli`` behaves identically to the
``dotenv-linter`` console script.
"""

from __future__ import annotations

from dotenv_linter_cli.cli.app import cli

if __name__ == "__main__":
    cli()
