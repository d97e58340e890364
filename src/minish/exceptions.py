"""Custom exception hierarchy for minish.

All exceptions that cross layer boundaries must inherit from
:class:`MinishError`.  Raw ``OSError`` instances raised while spawning
processes or changing directories must NEVER propagate beyond the
infrastructure layer — they are caught there and re-raised as a typed
subclass defined here.

Hierarchy
---------
MinishError
├── ParseError
│   ├── EmptyCommandError
│   ├── MismatchedQuotesError
│   └── CustomParseError
├── BuiltinError
├── CommandNotFoundError
├── CommandNotExecutableError
├── CommandFailedError
├── EnvironmentError
└── ConfigurationError
"""

from __future__ import annotations


class MinishError(Exception):
    """Base exception for all minish errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the read loop can render a clean message and
    carry on with the next line.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parsing ---------------------------------------------------------------

class ParseError(MinishError):
    """Raised when an input line cannot be turned into a command.

    Parse errors never carry partial results: a failed parse leaves
    nothing behind for the caller to clean up.
    """

    @property
    def detail(self) -> str:
        """The diagnostic text, without the hint."""
        return str(self)


class EmptyCommandError(ParseError):
    """Raised when a command name is required but the line has no tokens."""

    def __init__(self, message: str = "no command given", *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)


class MismatchedQuotesError(ParseError):
    """Raised for an unterminated quote, or a non-quote where one was expected."""


class CustomParseError(ParseError):
    """Raised when the quote reader is called with malformed input."""


# --- Dispatch --------------------------------------------------------------

class BuiltinError(MinishError):
    """Raised when a builtin is invoked incorrectly or cannot complete."""


class CommandNotFoundError(MinishError):
    """Raised when an external command cannot be located."""


class CommandNotExecutableError(MinishError):
    """Raised when an external command exists but cannot be executed."""


class CommandFailedError(MinishError):
    """Raised when spawning an external command fails for another reason."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(MinishError):
    """Raised when a required runtime dependency is not available."""


class ConfigurationError(MinishError):
    """Raised when settings from the environment or flags are invalid."""
