"""Tests for grapheme-addressed access (char_at, substring, index_of, ...)."""

import pytest

from wordcase import (
    GraphemeRange,
    char_at,
    escape,
    first_match_range,
    first_match_substring,
    index_of,
    index_of_pattern,
    length,
    matches,
    substring,
)

FAMILY = "\U0001f468\u200d\U0001f469\u200d\U0001f467"  # ZWJ sequence, one grapheme


# =============================================================================
# length / char_at
# =============================================================================


class TestLength:
    def test_ascii(self):
        assert length("hello") == 5

    def test_combining(self, decomposed_hello):
        assert length(decomposed_hello) == 5

    def test_zwj_sequence(self):
        assert length(FAMILY + "!") == 2

    def test_empty(self):
        assert length("") == 0


class TestCharAt:
    def test_ascii(self):
        assert char_at("hello", 1) == "e"

    def test_returns_whole_cluster(self, decomposed_hello):
        assert char_at(decomposed_hello, 1) == "e\u0301"
        assert char_at(decomposed_hello, 2) == "l"

    def test_emoji_sequence(self):
        assert char_at("a" + FAMILY + "b", 1) == FAMILY
        assert char_at("a" + FAMILY + "b", 2) == "b"

    def test_out_of_bounds(self, sample_texts):
        for text in sample_texts:
            assert char_at(text, -1) is None
            assert char_at(text, length(text)) is None
            assert char_at(text, length(text) + 10) is None

    def test_empty(self):
        assert char_at("", 0) is None


# =============================================================================
# substring
# =============================================================================


class TestSubstring:
    def test_grapheme_range(self, decomposed_hello):
        assert substring(decomposed_hello, GraphemeRange(2, 5)) == "llo"

    def test_tuple(self, decomposed_hello):
        assert substring(decomposed_hello, (0, 2)) == "he\u0301"

    def test_range_object(self):
        assert substring("hello", range(1, 4)) == "ell"

    def test_empty_range(self):
        assert substring("hello", (2, 2)) == ""

    def test_whole_string(self, decomposed_hello):
        assert substring(decomposed_hello, (0, 5)) == decomposed_hello

    def test_end_out_of_bounds(self):
        with pytest.raises(IndexError):
            substring("hello", (2, 6))

    def test_negative_start(self):
        with pytest.raises(ValueError):
            substring("hello", (-1, 2))

    def test_reversed(self):
        with pytest.raises(ValueError):
            substring("hello", (3, 1))

    def test_stepped_range_rejected(self):
        with pytest.raises(ValueError):
            substring("hello", range(0, 4, 2))


# =============================================================================
# Pattern access
# =============================================================================


class TestFirstMatch:
    def test_substring(self):
        assert first_match_substring("order 1234 shipped", r"\d+") == "1234"

    def test_no_match(self):
        assert first_match_substring("no digits", r"\d+") is None

    def test_after_combining_mark(self, decomposed_hello):
        assert first_match_substring(decomposed_hello, r"l+") == "ll"
        assert first_match_range(decomposed_hello, r"l+") == GraphemeRange(2, 4)

    def test_match_splitting_cluster(self, decomposed_hello):
        # matches the bare "e" without its accent
        assert first_match_substring(decomposed_hello, "he") is None
        assert first_match_range(decomposed_hello, "he") is None

    def test_match_including_cluster(self, decomposed_hello):
        assert first_match_substring(decomposed_hello, "he\u0301l") == "he\u0301l"


class TestIndexOf:
    def test_after_combining_mark(self, decomposed_hello):
        assert index_of(decomposed_hello, "llo") == 2

    def test_precomposed(self):
        assert index_of("h\u00e9llo", "llo") == 2

    def test_after_emoji(self):
        assert index_of(FAMILY + " hi", "hi") == 2

    def test_not_found(self):
        assert index_of("hello", "xyz") is None

    def test_literal_needle(self):
        assert index_of("a+b=c", "+") == 1
        assert index_of("abc", ".") is None
        assert index_of("file (1).txt", "(1)") == 5

    def test_single_character(self):
        assert index_of("hello", "l") == 2

    def test_pattern(self):
        assert index_of_pattern("abc123", r"\d") == 3
        assert index_of_pattern("abc", r"\d") is None

    def test_escape_used(self):
        assert index_of_pattern("a.b", escape(".")) == 1

    def test_skips_match_inside_cluster(self):
        # the first "e" carries an accent; the second stands alone
        assert index_of("e\u0301 e", "e") == 2

    def test_only_misaligned_matches(self, decomposed_hello):
        assert index_of(decomposed_hello, "e") is None

    def test_pattern_skips_match_inside_cluster(self):
        assert index_of_pattern("e\u0301x ex", r"e") == 3


class TestMatches:
    def test_match(self):
        assert matches("hello world", r"w\w+")

    def test_no_match(self):
        assert not matches("hello", r"\d")
