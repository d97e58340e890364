"""Core layer — tokenization, domain models and command routing.

Rules
-----
* No ``print()`` calls.
* No process spawning or working-directory changes (use protocols).
* No imports from ``cli`` or ``infra``.
"""

from minish.core.dispatcher import Dispatcher
from minish.core.models import DispatchOutcome, ParsedCommand, ProcessResult
from minish.core.protocols import Navigator, ProcessRunner
from minish.core.tokenizer import join_tokens, parse, quote_token, read_quoted, scan_chunk, tokenize

__all__: list[str] = [
    "DispatchOutcome",
    "Dispatcher",
    "Navigator",
    "ParsedCommand",
    "ProcessResult",
    "ProcessRunner",
    "join_tokens",
    "parse",
    "quote_token",
    "read_quoted",
    "scan_chunk",
    "tokenize",
]
