"""Infrastructure layer — integration with the installed lint backend.

Every raw import failure must be caught here and re-raised as a
:class:`~dotenv_linter_cli.exceptions.DotenvLinterError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from dotenv_linter_cli.infra.backend_loader import ENTRY_POINT_GROUP, load_backend

__all__: list[str] = [
    "ENTRY_POINT_GROUP",
    "load_backend",
]
