"""CLI application entry point for minish.

This module is the process-level error boundary.  It catches
:class:`~minish.exceptions.MinishError`, ``KeyboardInterrupt``, and any
unexpected ``Exception``, rendering user-friendly messages via Rich and
returning well-defined exit codes.

Architecture notes
------------------
* No parsing or dispatch logic lives here — the read loop and the core
  layer do the work.
* This module wires settings, logging, infra adapters and the
  dispatcher together.
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from minish.cli import exit_codes
from minish.cli.console import console, escape_markup
from minish.cli.repl import Repl
from minish.config import ShellSettings, get_settings
from minish.core.dispatcher import Dispatcher
from minish.exceptions import ConfigurationError, MinishError
from minish.infra.navigator import OsNavigator
from minish.infra.process_runner import SubprocessRunner
from minish.logging_utils import configure_logging
from minish.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``minish``                 — interactive session
    * ``minish -c "<line>"``     — run a single line and exit
    * ``minish --version``
    """
    parser = argparse.ArgumentParser(
        prog="minish",
        description="Minimal interactive shell with quote-aware parsing.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--command",
        default=None,
        metavar="LINE",
        help="Run LINE as a single command and exit with its status.",
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="Prompt text (overrides MINISH_PROMPT).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level, e.g. DEBUG (overrides MINISH_LOG_LEVEL).",
    )
    parser.add_argument(
        "--no-status",
        action="store_true",
        help="Do not report non-zero exit statuses of commands.",
    )
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _load_settings(args: argparse.Namespace) -> ShellSettings:
    try:
        return get_settings(
            prompt=args.prompt,
            log_level=args.log_level,
            report_status=False if args.no_status else None,
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid settings: {problems}",
            hint="Check MINISH_* environment variables and command-line flags.",
        ) from exc


def _write_stdout(text: str) -> None:
    print(text, flush=True)


def build_repl(settings: ShellSettings) -> Repl:
    """Assemble a :class:`Repl` backed by the real operating system."""
    dispatcher = Dispatcher(
        runner=SubprocessRunner(),
        navigator=OsNavigator(),
        output=_write_stdout,
    )
    return Repl(dispatcher, settings)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the minish CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = _load_settings(args)
    configure_logging(settings.log_level)

    repl = build_repl(settings)
    if args.command is not None:
        return repl.run_line(args.command).exit_code
    return repl.run()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MinishError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
