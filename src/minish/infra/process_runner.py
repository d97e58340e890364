"""Infrastructure: foreground execution of external commands.

This module is the **only** place in the codebase that imports
``subprocess``.  Every ``OSError`` raised while spawning is caught here
and re-raised as a typed :class:`~minish.exceptions.MinishError`
subclass — nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from minish.core.models import ProcessResult
from minish.exceptions import CommandFailedError, CommandNotExecutableError, CommandNotFoundError


class SubprocessRunner:
    """Concrete :class:`~minish.core.protocols.ProcessRunner` using ``subprocess``.

    The child inherits stdin, stdout, stderr, the environment and the
    current working directory.  Commands without a path separator are
    looked up on ``PATH``.
    """

    def run(self, argv: Sequence[str]) -> ProcessResult:
        """Spawn *argv* and block until it exits."""
        if not argv:
            raise CommandFailedError("Cannot run an empty command.")

        args = list(argv)
        name = args[0]
        try:
            completed = subprocess.run(args, check=False)
        except FileNotFoundError as exc:
            raise CommandNotFoundError(
                f"{name}: command not found",
                hint="Check the spelling, or give a full path to the program.",
            ) from exc
        except PermissionError as exc:
            raise CommandNotExecutableError(
                f"{name}: permission denied",
                hint="The file may not be executable (see `chmod +x`), or may be a directory.",
            ) from exc
        except OSError as exc:
            raise CommandFailedError(f"{name}: {exc.strerror or exc}") from exc

        return ProcessResult(argv=tuple(args), returncode=completed.returncode)
