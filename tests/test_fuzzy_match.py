"""Tests for the per-term matcher."""

import pytest

from fuzzy_match import COLLAPSED, EXACT, FUZZY, MATCH_KINDS, NORMALIZED, match_term
from policy import MatchPolicy

# ---------------------------------------------------------------------------
# Each strategy on its own
# ---------------------------------------------------------------------------


class TestStrategies:
    def test_exact_substring(self):
        assert match_term("du bist dumm", "dumm") == EXACT
        assert match_term("dummkopf", "dumm") == EXACT

    def test_whole_text_equals_term(self):
        assert match_term("porno", "porno") == EXACT

    def test_normalized_substring(self):
        assert match_term("mein schluessel ist weg", "schlüssel") == NORMALIZED
        assert match_term("so eine scheisse", "scheiße") == NORMALIZED

    def test_underscore_term_matches_spaced_text(self):
        assert match_term("so ein bad word", "bad_word") == NORMALIZED

    def test_collapsed_substring(self):
        assert match_term("so ein badword", "bad_word") == COLLAPSED
        assert match_term("arschgeficktegummifotze", "arschgefickte gummifotze") == COLLAPSED

    def test_fuzzy_one_edit(self):
        assert match_term("du bist so dumn heute", "dumm") == FUZZY

    def test_fuzzy_insertion_and_deletion(self):
        assert match_term("du bist so dum", "dumm") == FUZZY
        assert match_term("du bist so dummm", "dumm") == EXACT
        assert match_term("du bist so duumm", "dumm") == FUZZY

    def test_fuzzy_splits_on_any_whitespace(self):
        assert match_term("du\tdumn\nheute", "dumm") == FUZZY

    def test_kinds_are_ordered_loosest_last(self):
        assert MATCH_KINDS == (EXACT, NORMALIZED, COLLAPSED, FUZZY)


# ---------------------------------------------------------------------------
# Things that must NOT match
# ---------------------------------------------------------------------------


class TestNoMatch:
    def test_two_edits_away(self):
        assert match_term("du bist so dunn heute", "dumm") is None

    def test_empty_text_or_term(self):
        assert match_term("", "dumm") is None
        assert match_term("du bist dumm", "") is None
        assert match_term("", "") is None

    def test_upper_case_text_is_not_lowered_here(self):
        assert match_term("DUMM", "dumm") is None

    def test_separator_only_term_never_collapses_to_everything(self):
        assert match_term("dumm", "_") is None

    def test_clean_sentence(self):
        assert match_term("hab einen schoenen tag", "dumm") is None


# ---------------------------------------------------------------------------
# Policy constants
# ---------------------------------------------------------------------------


class TestPolicy:
    def test_length_gate(self):
        strict = MatchPolicy(max_length_delta=0)
        assert match_term("so dum", "dumm", strict) is None
        assert match_term("so dumn", "dumm", strict) == FUZZY

    def test_length_gate_is_inclusive(self):
        # "du" is 2 shorter than "dumm": compared, but distance 2 is too far
        assert match_term("du", "dumm") is None
        assert match_term("du", "dumm", MatchPolicy(max_distance=3)) == FUZZY

    def test_tokens_far_longer_than_term_are_skipped(self):
        # "dxmmxxx" is 3 longer than "dumm"
        assert match_term("dxmmxxx", "dumm", MatchPolicy(max_distance=10)) is None

    @pytest.mark.parametrize(
        "max_distance, text, expected",
        [
            (1, "dumn", None),
            (2, "dumn", FUZZY),
            (2, "dunn", None),
            (3, "dunn", FUZZY),
        ],
    )
    def test_distance_threshold_is_exclusive(self, max_distance, text, expected):
        assert match_term(text, "dumm", MatchPolicy(max_distance=max_distance)) == expected

    def test_fuzzy_compares_against_raw_term(self):
        assert match_term("das ist mein schlüsel", "schlüssel") == FUZZY
