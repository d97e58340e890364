"""The interactive read loop.

One iteration prompts, reads a line, parses it, dispatches it and
reports the outcome; it always completes before the next prompt.  This
module is the error boundary for a session: a bad line is reported and
the loop carries on.  Only ``exit`` or end of input ends the session.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from types import ModuleType

from loguru import logger

from minish.cli import exit_codes
from minish.cli.console import console, escape_markup
from minish.config import ShellSettings
from minish.core.dispatcher import Dispatcher
from minish.core.models import DispatchOutcome
from minish.core.tokenizer import parse
from minish.exceptions import (
    CommandNotExecutableError,
    CommandNotFoundError,
    EmptyCommandError,
    MinishError,
    ParseError,
)


def _status_for(exc: MinishError) -> int:
    """Map a dispatch error to the status it leaves behind."""
    if isinstance(exc, CommandNotFoundError):
        return exit_codes.COMMAND_NOT_FOUND
    if isinstance(exc, CommandNotExecutableError):
        return exit_codes.NOT_EXECUTABLE
    return exit_codes.GENERAL_ERROR


def _report(prefix: str, exc: MinishError) -> None:
    console.print(f"[bold red]{prefix}:[/bold red] {escape_markup(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")


def _load_readline() -> ModuleType | None:
    """Import :mod:`readline` for line editing, when the platform has it."""
    try:
        import readline
    except ImportError:
        logger.debug("readline unavailable; line editing and history disabled")
        return None
    return readline


class Repl:
    """Drive the prompt → parse → dispatch cycle.

    Parameters
    ----------
    dispatcher:
        Routes parsed commands to builtins or external processes.
    settings:
        Prompt text, status reporting and history options.
    read_line:
        Callable that writes a prompt and returns one line, raising
        ``EOFError`` at end of input.  Defaults to the console.
    """

    def __init__(
        self,
        dispatcher: Dispatcher,
        settings: ShellSettings,
        *,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._settings = settings
        self._read_line: Callable[[str], str] = read_line or self._prompt
        self._line_editing: bool = False
        self.last_status: int = exit_codes.SUCCESS

    def _prompt(self, prompt: str) -> str:
        return console.input(prompt, line_editing=self._line_editing)

    # ------------------------------------------------------------------
    # Single line
    # ------------------------------------------------------------------

    def run_line(self, line: str) -> DispatchOutcome:
        """Parse and dispatch one line, reporting any error.

        Never raises :class:`MinishError`; the returned outcome carries
        the resulting status.
        """
        try:
            command = parse(line)
        except EmptyCommandError:
            return DispatchOutcome(exit_code=self.last_status)
        except ParseError as exc:
            _report("Error parsing input", exc)
            self.last_status = exit_codes.GENERAL_ERROR
            return DispatchOutcome(exit_code=self.last_status)

        try:
            outcome = self._dispatcher.dispatch(command, last_status=self.last_status)
        except MinishError as exc:
            _report("Error", exc)
            self.last_status = _status_for(exc)
            return DispatchOutcome(exit_code=self.last_status)

        result = outcome.result
        if result is not None and not result.success and self._settings.report_status:
            console.print(f"[yellow]{escape_markup(result.describe())}[/yellow]")

        self.last_status = outcome.exit_code
        return outcome

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def run(self) -> int:
        """Loop until ``exit`` or end of input; return the session status."""
        readline = _load_readline()
        self._line_editing = readline is not None and sys.stdin.isatty()
        self._load_history(readline)
        try:
            return self._loop()
        finally:
            self._save_history(readline)

    def _loop(self) -> int:
        while True:
            try:
                line = self._read_line(self._settings.prompt)
            except EOFError:
                console.print()
                return self.last_status
            except KeyboardInterrupt:
                console.print()
                self.last_status = exit_codes.KEYBOARD_INTERRUPT
                continue

            try:
                outcome = self.run_line(line)
            except KeyboardInterrupt:
                console.print()
                self.last_status = exit_codes.KEYBOARD_INTERRUPT
                continue

            if outcome.should_exit:
                return outcome.exit_code

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def _load_history(self, readline: ModuleType | None) -> None:
        path = self._settings.history_file
        if readline is None or path is None:
            return
        try:
            readline.read_history_file(str(path.expanduser()))
        except FileNotFoundError:
            logger.debug("no history file at {}", path)
        except OSError as exc:
            logger.warning("could not read history file {}: {}", path, exc)

    def _save_history(self, readline: ModuleType | None) -> None:
        path = self._settings.history_file
        if readline is None or path is None:
            return
        try:
            readline.write_history_file(str(path.expanduser()))
        except OSError as exc:
            logger.warning("could not write history file {}: {}", path, exc)
