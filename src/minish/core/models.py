"""Domain models for minish.

All models are **frozen** dataclasses — immutable value objects that
carry no I/O and no dependencies on external packages.
"""

from __future__ import annotations

import signal as _signal
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """A tokenized line split into a command name and its arguments."""

    name: str
    """The first token of the line."""

    args: tuple[str, ...] = ()
    """Remaining tokens, in order.  May be empty."""

    @property
    def argv(self) -> tuple[str, ...]:
        """Name followed by arguments, as handed to an external process."""
        return (self.name, *self.args)


# ---------------------------------------------------------------------------
# External process result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of running an external command to completion."""

    argv: tuple[str, ...]
    returncode: int
    """Raw return code.  Negative on POSIX when killed by a signal."""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def signal(self) -> int | None:
        """Terminating signal number, or ``None`` for a normal exit."""
        if self.returncode < 0:
            return -self.returncode
        return None

    @property
    def exit_status(self) -> int:
        """Shell-style status: ``128 + signal`` for signalled processes."""
        sig = self.signal
        if sig is not None:
            return 128 + sig
        return self.returncode

    def describe(self) -> str:
        """Human-readable status line, e.g. ``exit status 2``."""
        sig = self.signal
        if sig is None:
            return f"exit status {self.returncode}"
        try:
            name = _signal.Signals(sig).name
        except ValueError:
            return f"terminated by signal {sig}"
        return f"terminated by signal {sig} ({name})"


# ---------------------------------------------------------------------------
# Dispatch outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """What the read loop should do after a command has been handled."""

    exit_code: int
    """Status of the handled command (or the session, when exiting)."""

    should_exit: bool = False
    """``True`` when the session must end after this command."""

    result: ProcessResult | None = None
    """The external process result, or ``None`` for builtins."""
