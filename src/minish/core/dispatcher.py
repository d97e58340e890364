"""Core dispatcher — routes a parsed command to a builtin or a process.

The dispatcher depends on a :class:`~minish.core.protocols.ProcessRunner`
and a :class:`~minish.core.protocols.Navigator` injected at construction
time, keeping the core free of ``subprocess`` and ``os.chdir``.

Guarantees
----------
* No ``print()``; builtin output goes through the injected *output*
  callable.
* Only :class:`~minish.exceptions.MinishError` subclasses escape.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from loguru import logger

from minish.core.models import DispatchOutcome, ParsedCommand
from minish.core.protocols import Navigator, ProcessRunner
from minish.core.tokenizer import join_tokens
from minish.exceptions import BuiltinError, CommandFailedError, MinishError

Builtin = Callable[[Sequence[str], int], DispatchOutcome]

_EXIT_CODE = re.compile(r"[+-]?[0-9]+")


class Dispatcher:
    """Route :class:`ParsedCommand` objects to builtins or the runner.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ProcessRunner` protocol.
    navigator:
        Any object satisfying the :class:`Navigator` protocol.
    output:
        Callable receiving one line of builtin output (e.g. ``pwd``).
    """

    def __init__(
        self,
        runner: ProcessRunner,
        navigator: Navigator,
        output: Callable[[str], None],
    ) -> None:
        self._runner: ProcessRunner = runner
        self._navigator: Navigator = navigator
        self._output: Callable[[str], None] = output
        self._builtins: dict[str, Builtin] = {
            "cd": self._cd,
            "exit": self._exit,
            "pwd": self._pwd,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, command: ParsedCommand, *, last_status: int = 0) -> DispatchOutcome:
        """Handle *command* and report what the session should do next.

        *last_status* is the status of the previous command; ``exit``
        without an argument ends the session with it.

        Raises
        ------
        BuiltinError
            When a builtin is misused or fails.
        CommandNotFoundError, CommandNotExecutableError, CommandFailedError
            Propagated from the runner.
        """
        builtin = self._builtins.get(command.name)
        if builtin is not None:
            logger.debug("builtin {} args={}", command.name, list(command.args))
            try:
                return builtin(command.args, last_status)
            except MinishError:
                raise
            except Exception as exc:
                raise BuiltinError(f"{command.name}: {exc}") from exc

        logger.debug("spawning {}", join_tokens(command.argv))
        try:
            result = self._runner.run(command.argv)
        except MinishError:
            raise
        except Exception as exc:
            raise CommandFailedError(
                f"{command.name}: unexpected error while running command: {exc}",
            ) from exc
        logger.debug("{} exited with {}", command.name, result.returncode)
        return DispatchOutcome(exit_code=result.exit_status, result=result)

    # ------------------------------------------------------------------
    # Builtins
    # ------------------------------------------------------------------

    def _cd(self, args: Sequence[str], last_status: int) -> DispatchOutcome:
        if len(args) > 1:
            raise BuiltinError("cd: too many arguments")
        target = args[0] if args else None
        new_dir = self._navigator.change(target)
        logger.debug("working directory is now {}", new_dir)
        return DispatchOutcome(exit_code=0)

    def _pwd(self, args: Sequence[str], last_status: int) -> DispatchOutcome:
        if args:
            raise BuiltinError("pwd: too many arguments")
        self._output(str(self._navigator.current()))
        return DispatchOutcome(exit_code=0)

    def _exit(self, args: Sequence[str], last_status: int) -> DispatchOutcome:
        if len(args) > 1:
            raise BuiltinError("exit: too many arguments")
        if not args:
            return DispatchOutcome(exit_code=last_status, should_exit=True)
        if _EXIT_CODE.fullmatch(args[0]) is None:
            raise BuiltinError(
                f"exit: {args[0]}: numeric argument required",
                hint="Use an integer exit status, e.g. `exit 1`.",
            )
        return DispatchOutcome(exit_code=int(args[0]) % 256, should_exit=True)
