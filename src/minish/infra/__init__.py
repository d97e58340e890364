"""Infrastructure layer — operating-system integration.

This layer wraps process spawning and working-directory changes.  Every
raw ``OSError`` must be caught here and re-raised as a
:class:`~minish.exceptions.MinishError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from minish.infra.navigator import OsNavigator
from minish.infra.process_runner import SubprocessRunner

__all__: list[str] = [
    "OsNavigator",
    "SubprocessRunner",
]
