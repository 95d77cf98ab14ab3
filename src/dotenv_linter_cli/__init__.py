"""dotenv-linter — command invocation layer for a ``.env`` file linter.

Resolves what the user asked for (check, fix, list, compare), builds the
invocation context, hands it to a pluggable lint backend and turns the
outcome into a process exit code.
"""

from dotenv_linter_cli.version import __version__

__all__: list[str] = ["__version__"]
