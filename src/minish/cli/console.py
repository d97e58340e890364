"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and the read
loop itself remain functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from minish.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(**options: Any) -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, **options)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in user-supplied *text*; identity without Rich."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``/``input``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def input(self, prompt: str = "", *, line_editing: bool = False) -> str:
		"""Write *prompt* to stderr and read one line from stdin.

		With *line_editing*, the prompt is handed to :func:`input` instead so
		readline can redraw it.  Raises ``EOFError`` at end of input.
		"""
		if line_editing:
			return input(prompt)
		try:
			rich_console = get_rich_console(highlight=False)
		except EnvironmentError:
			sys.stderr.write(prompt)
			sys.stderr.flush()
			return input()
		return rich_console.input(prompt, markup=False, emoji=False)


console = _ConsoleProxy()
