"""
Unit tests for abbreviation tagging.
"""

import pytest

from leipzig.core.config import GlossConfig
from leipzig.core.constants import ABBREVIATIONS
from leipzig.core.models import Segment
from leipzig.processing.tag import (
    RESOLUTION_RULES,
    describe,
    lookup_negated,
    lookup_verbatim,
    tag,
    tag_cell,
)


def _abbrs(segments):
    return [(seg.text, seg.title) for seg in segments if seg.is_abbr]


class TestDescribe:
    """Test the ordered resolution rules."""

    def test_rule_order(self):
        assert RESOLUTION_RULES == [lookup_verbatim, lookup_negated]

    def test_verbatim(self):
        assert describe("PL", ABBREVIATIONS) == "plural"

    def test_n_prefixed_code_found_verbatim(self):
        assert describe("NEG", ABBREVIATIONS) == "negation / negative"

    def test_verbatim_beats_negation(self):
        table = {"NPL": "custom", "PL": "plural"}
        assert describe("NPL", table) == "custom"

    def test_negated(self):
        assert describe("NSG", ABBREVIATIONS) == "non-singular"

    def test_bare_n(self):
        assert describe("N", ABBREVIATIONS) == "neuter"

    def test_unknown(self):
        assert describe("XYZ", ABBREVIATIONS) is None
        assert describe("NXYZ", ABBREVIATIONS) is None

    def test_lookup_negated_needs_prefix(self):
        assert lookup_negated("PL", ABBREVIATIONS) is None
        assert lookup_negated("N", ABBREVIATIONS) is None


class TestTag:
    """Test splitting tokens into literal and abbreviation segments."""

    def test_person_and_number_are_separate(self):
        segments = tag("3PL", ABBREVIATIONS)
        assert _abbrs(segments) == [("3", "third person"), ("PL", "plural")]
        assert all(seg.is_abbr for seg in segments)

    def test_negated_code(self):
        assert _abbrs(tag("NPL", ABBREVIATIONS)) == [("NPL", "non-plural")]

    def test_literal_text_is_kept(self):
        segments = tag("dog.NOM", ABBREVIATIONS)
        assert segments[0] == Segment(text="dog.")
        assert _abbrs(segments) == [("NOM", "nominative")]

    def test_mixed_token(self):
        segments = tag("see.3SG", ABBREVIATIONS)
        assert [seg.text for seg in segments] == ["see.", "3", "SG"]
        assert _abbrs(segments) == [("3", "third person"), ("SG", "singular")]

    def test_trailing_literal(self):
        segments = tag("PL-ish", ABBREVIATIONS)
        assert [seg.text for seg in segments] == ["PL", "-ish"]

    @pytest.mark.parametrize("text", ["dog", "the big dog", "12", "see-s", ""])
    def test_no_matches_gives_input_back(self, text):
        segments = tag(text, ABBREVIATIONS)
        assert not any(seg.is_abbr for seg in segments)
        assert "".join(seg.text for seg in segments) == text

    def test_digit_outside_table_still_wrapped(self):
        assert _abbrs(tag("4", ABBREVIATIONS)) == [("4", None)]

    def test_unknown_code_still_wrapped(self):
        assert _abbrs(tag("XYZ", ABBREVIATIONS)) == [("XYZ", None)]

    def test_empty_table(self):
        segments = tag("DET 3SG NPL", {})
        assert _abbrs(segments) == [("DET", None), ("3", None), ("SG", None), ("NPL", None)]

    def test_abbreviation_class(self):
        segments = tag("PL", ABBREVIATIONS, abbr_class="x-abbr")
        assert segments[0].classes == ["x-abbr"]

    def test_none_token(self):
        assert tag(None, ABBREVIATIONS) == []


class TestTagCell:
    """Test configuration-dependent cell tagging."""

    def test_auto_tag_on(self):
        segments = tag_cell("dog.NOM", GlossConfig())
        assert _abbrs(segments) == [("NOM", "nominative")]
        assert segments[1].classes == ["gloss__abbr"]

    def test_auto_tag_off(self):
        assert tag_cell("dog.NOM", GlossConfig(auto_tag=False)) == [Segment(text="dog.NOM")]

    def test_blank_cell_is_literal(self):
        assert tag_cell("  ", GlossConfig()) == [Segment(text="  ")]

    def test_empty_cell_has_no_segments(self):
        assert tag_cell("", GlossConfig()) == []

    def test_custom_abbreviation_class(self):
        config = GlossConfig.from_options({"classes": {"abbr": "sc"}})
        assert tag_cell("PL", config)[0].classes == ["sc"]
