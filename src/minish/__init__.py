"""minish — a minimal interactive shell.

Reads a line, splits it with quote-aware tokenization, and dispatches
it to a builtin or an external process.
"""

from minish.version import __version__

__all__: list[str] = ["__version__"]
