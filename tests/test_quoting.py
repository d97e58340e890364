"""Tests for re-quoting tokens (core/tokenizer.py ``quote_token``/``join_tokens``).

The key property: quoting a token list and tokenizing the result gives
back the same list, for any mix of whitespace and quote characters.
"""

from __future__ import annotations

import pytest

from minish.core.tokenizer import join_tokens, quote_token, tokenize


class TestQuoteToken:
    def test_plain_token_is_unchanged(self) -> None:
        assert quote_token("ls") == "ls"
        assert quote_token("/usr/bin/printf") == "/usr/bin/printf"

    def test_backslash_needs_no_quoting(self) -> None:
        assert quote_token("a\\nb") == "a\\nb"

    def test_empty_token(self) -> None:
        assert quote_token("") == "''"

    def test_whitespace_uses_single_quotes(self) -> None:
        assert quote_token("a b") == "'a b'"

    def test_single_quote_switches_to_double(self) -> None:
        assert quote_token("it's") == "'it'\"'s\""

    def test_double_quote_stays_in_single(self) -> None:
        assert quote_token('say "hi"') == "'say \"hi\"'"


class TestJoinTokens:
    def test_joins_with_single_spaces(self) -> None:
        assert join_tokens(["echo", "a b", "c"]) == "echo 'a b' c"

    def test_empty_sequence(self) -> None:
        assert join_tokens([]) == ""

    @pytest.mark.parametrize(
        "tokens",
        [
            ["echo", "but   not  if    they're    in    quotes"],
            ["/usr/bin/printf", "The cat's name is %s.\\n", "Theodore Roosevelt"],
            ["mv", "Movie name with spaces.mkv", ""],
            ["x", "'", '"', "'\"'\"", "\"'"],
            ["tab\tand\nnewline", "  padded  "],
            ["ünï cødé", "→"],
        ],
    )
    def test_round_trips_through_tokenize(self, tokens: list[str]) -> None:
        assert tokenize(join_tokens(tokens)) == tokens

    def test_information_separator_needs_no_quoting(self) -> None:
        assert quote_token("a\x1fb") == "a\x1fb"
        assert tokenize(join_tokens(["\x1c", "x y"])) == ["\x1c", "x y"]
