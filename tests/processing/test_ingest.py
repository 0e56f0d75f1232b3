"""
Unit tests for line splitting, role classification and tokenization.
"""

import pytest

from leipzig.core.config import GlossConfig
from leipzig.core.models import LineRole
from leipzig.processing.ingest import classify_lines, lex, lex_lines, split_lines


class TestSplitLines:
    """Test splitting a block into lines."""

    def test_empty(self):
        assert split_lines("") == []

    def test_terminators_removed_whitespace_kept(self):
        assert split_lines("  a  b \r\nc\n") == ["  a  b ", "c"]

    def test_only_line_feeds_split(self):
        text = "orig\nword.PL\u2028tail\x0cx\x85y\nfree"
        assert split_lines(text) == ["orig", "word.PL\u2028tail\x0cx\x85y", "free"]

    def test_single_trailing_newline_dropped(self):
        assert split_lines("a\nb\n") == ["a", "b"]
        assert split_lines("a\n\n") == ["a", ""]

    def test_bare_carriage_return_is_not_a_break(self):
        assert split_lines("a\rb\r\n") == ["a\rb"]


class TestClassifyLines:
    """Test positional role assignment."""

    def _roles(self, count, **flags):
        lines = [f"line {i}" for i in range(count)]
        return [line.role for line in classify_lines(lines, GlossConfig(**flags))]

    def test_default_last_line_free(self):
        assert self._roles(3) == [LineRole.ANALYSIS, LineRole.ANALYSIS, LineRole.FREE_TRANSLATION]

    def test_first_line_original(self):
        assert self._roles(3, first_line_orig=True) == [
            LineRole.ORIGINAL,
            LineRole.ANALYSIS,
            LineRole.FREE_TRANSLATION,
        ]

    def test_single_line_is_never_free(self):
        assert self._roles(1) == [LineRole.ANALYSIS]

    def test_single_line_original(self):
        assert self._roles(1, first_line_orig=True) == [LineRole.ORIGINAL]

    def test_two_lines_both_flags(self):
        assert self._roles(2, first_line_orig=True) == [LineRole.ORIGINAL, LineRole.FREE_TRANSLATION]

    def test_flags_off(self):
        assert self._roles(3, last_line_free=False) == [LineRole.ANALYSIS] * 3

    def test_roles_ignore_content(self):
        lines = ["DET dog.NOM", "the dog"]
        roles = [line.role for line in classify_lines(lines, GlossConfig())]
        assert roles == [LineRole.ANALYSIS, LineRole.FREE_TRANSLATION]

    def test_indices_and_text_preserved(self):
        lines = classify_lines(["a", " b "], GlossConfig(last_line_free=False))
        assert [(line.index, line.text) for line in lines] == [(0, "a"), (1, " b ")]


class TestLex:
    """Test the tokenizer grammar."""

    @pytest.mark.parametrize("text", ["", "   ", "\t \t"])
    def test_blank_input_yields_no_tokens(self, text):
        assert lex(text) == []

    def test_brace_group_is_one_token(self):
        assert lex("{a b} c") == ["a b", "c"]

    def test_whitespace_runs_are_skipped(self):
        assert lex("  DET   dog.NOM\tsee.3SG ") == ["DET", "dog.NOM", "see.3SG"]

    def test_empty_brace_group_is_dropped(self):
        assert lex("{} x") == ["x"]

    def test_brace_group_adjacent_to_word(self):
        assert lex("{a b}c") == ["a b", "c"]

    def test_unclosed_brace_degrades_to_words(self):
        assert lex("{a b c") == ["{a", "b", "c"]

    def test_brace_group_keeps_punctuation(self):
        assert lex("{the big, red} dog") == ["the big, red", "dog"]

    def test_custom_grammar_without_groups(self):
        assert lex("a-b c", r"[^\s-]+") == ["a", "b", "c"]


def test_lex_lines_only_tokenizes_analysis_lines():
    config = GlossConfig(first_line_orig=True)
    lines = classify_lines(["orig text", "a b", "{c d} e", "free text"], config)
    assert lex_lines(lines, config) == [["a", "b"], ["c d", "e"]]
