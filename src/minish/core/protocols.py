"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so the dispatcher can be exercised without spawning
processes or touching the real working directory.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from minish.core.models import ProcessResult


class ProcessRunner(Protocol):
    """Contract for external command execution backends.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(self, argv: Sequence[str]) -> ProcessResult:
        """Run *argv* in the foreground and wait for it to exit.

        The child inherits the shell's standard streams, environment
        and working directory.

        Raises
        ------
        CommandNotFoundError
            When ``argv[0]`` cannot be located.
        CommandNotExecutableError
            When ``argv[0]`` exists but cannot be executed.
        CommandFailedError
            For any other spawn failure.
        """
        ...  # pragma: no cover


class Navigator(Protocol):
    """Contract for working-directory access used by ``cd`` and ``pwd``."""

    def current(self) -> Path:
        """Return the current working directory."""
        ...  # pragma: no cover

    def change(self, target: str | None) -> Path:
        """Change to *target* (home directory when ``None``).

        Returns the new working directory.

        Raises
        ------
        BuiltinError
            When the target does not exist, is not a directory, or
            cannot be entered.
        """
        ...  # pragma: no cover
