"""Quote-aware tokenization of a command line.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

A line is split into whitespace-separated fields.  Inside a field, a
``"`` or ``'`` opens a literal span that runs to the next quote of the
same kind; the span's content (without delimiters) is glued onto
whatever unquoted text surrounds it, so ``"a b"c`` is the single token
``a bc``.  There is no escaping of any kind: backslashes are ordinary
characters, and a quote of the other kind inside a span is literal.

Scanning functions return ``(remaining, parsed)`` pairs, where
``remaining`` is the unconsumed suffix of their input.
"""

from __future__ import annotations

from collections.abc import Iterable

from minish.core.models import ParsedCommand
from minish.exceptions import CustomParseError, EmptyCommandError, MismatchedQuotesError

QUOTE_CHARS: frozenset[str] = frozenset({'"', "'"})

# Information separators count as whitespace for str.isspace but not as
# field separators here.
_NOT_BLANK: frozenset[str] = frozenset("\x1c\x1d\x1e\x1f")


def is_blank(ch: str) -> bool:
    """Return whether *ch* separates fields (Unicode White_Space)."""
    return ch.isspace() and ch not in _NOT_BLANK


def _strip_blanks(text: str) -> str:
    start, end = 0, len(text)
    while start < end and is_blank(text[start]):
        start += 1
    while end > start and is_blank(text[end - 1]):
        end -= 1
    return text[start:end]


# ---------------------------------------------------------------------------
# Quote-span reader
# ---------------------------------------------------------------------------

def read_quoted(text: str) -> tuple[str, str]:
    """Read the quoted span at the start of *text*.

    Returns ``(remaining, content)``: *content* excludes both quote
    characters and *remaining* starts immediately after the closing one.

    Raises
    ------
    CustomParseError
        If *text* is empty.
    MismatchedQuotesError
        If *text* does not start with a quote, or the quote is never
        closed.
    """
    if not text:
        raise CustomParseError(
            "expected quote, found nothing at position 0 "
            "when trying to parse a quoted string",
        )

    quote = text[0]
    if quote not in QUOTE_CHARS:
        raise MismatchedQuotesError(
            f"Expected a single or double quote, found {quote} at position 0 "
            "when trying to parse a quoted string",
        )

    end = text.find(quote, 1)
    if end == -1:
        raise MismatchedQuotesError(
            f"could not find closing quotes when trying to parse `{text}`, "
            f"expected `{quote}`",
            hint="Close the quote or use the other quote character.",
        )

    return text[end + 1:], text[1:end]


# ---------------------------------------------------------------------------
# Chunk scanner
# ---------------------------------------------------------------------------

def scan_chunk(text: str) -> tuple[str, str]:
    """Consume one field from the start of *text*.

    Unquoted whitespace ends the field; the returned remainder starts at
    that whitespace (or is empty at end of input).  Quoted spans are
    unwrapped and merged into the field.
    """
    parts: list[str] = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if is_blank(ch):
            return text[pos:], "".join(parts)
        if ch in QUOTE_CHARS:
            remaining, content = read_quoted(text[pos:])
            parts.append(content)
            text, pos = remaining, 0
            continue
        parts.append(ch)
        pos += 1
    return "", "".join(parts)


# ---------------------------------------------------------------------------
# Chunk-splitting driver
# ---------------------------------------------------------------------------

def tokenize(line: str) -> list[str]:
    """Split *line* into tokens.

    An empty or all-whitespace line yields ``[]``.  The first error
    raised by a sub-scan aborts the whole parse.
    """
    tokens: list[str] = []
    remaining = _strip_blanks(line)
    while remaining:
        if is_blank(remaining[0]):
            remaining = _strip_blanks(remaining)
            continue
        remaining, token = scan_chunk(remaining)
        tokens.append(token)
    return tokens


def parse(line: str) -> ParsedCommand:
    """Tokenize *line* and split it into command name and arguments.

    Raises
    ------
    EmptyCommandError
        If the line holds no tokens at all.
    MismatchedQuotesError, CustomParseError
        Propagated unchanged from :func:`tokenize`.
    """
    tokens = tokenize(line)
    if not tokens:
        raise EmptyCommandError()
    return ParsedCommand(name=tokens[0], args=tuple(tokens[1:]))


# ---------------------------------------------------------------------------
# Re-quoting
# ---------------------------------------------------------------------------

def _needs_quoting(token: str) -> bool:
    return not token or any(is_blank(ch) or ch in QUOTE_CHARS for ch in token)


def quote_token(token: str) -> str:
    """Render *token* so that :func:`tokenize` reads it back unchanged.

    Plain tokens are returned as-is.  Otherwise the token is wrapped in
    single quotes, switching to an adjacent double-quoted span for each
    run that contains a single quote.
    """
    if not _needs_quoting(token):
        return token
    if not token:
        return "''"

    spans: list[tuple[str, list[str]]] = []
    for ch in token:
        if spans and ch != spans[-1][0]:
            spans[-1][1].append(ch)
            continue
        quote = '"' if ch == "'" else "'"
        spans.append((quote, [ch]))
    return "".join(f"{quote}{''.join(chars)}{quote}" for quote, chars in spans)


def join_tokens(tokens: Iterable[str]) -> str:
    """Quote each token and join them with single spaces."""
    return " ".join(quote_token(token) for token in tokens)
