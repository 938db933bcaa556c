"""
Tests for shared tokenization and stop-word helpers.
"""

import pytest

from notelens.core.utils import nlp_utils
from notelens.core.utils.nlp_utils import (
    STOP_WORDS_EN,
    Token,
    count_words,
    filter_stopwords,
    get_stopwords,
    has_meaningful_content,
    round_half_up,
    split_sentences,
    strip_non_word_chars,
    tokenize,
    tokenize_words,
)


class TestTokenize:
    """Tests for tokenize and tokenize_words."""

    def test_empty_text(self):
        assert tokenize("") == []
        assert tokenize_words("") == []

    def test_offsets_index_into_text(self):
        text = "Hello, big world!"
        tokens = tokenize(text)
        assert [t.text for t in tokens] == ["Hello", "big", "world"]
        for token in tokens:
            assert text[token.start:token.end] == token.text

    def test_apostrophes_and_hyphens_are_word_internal(self):
        assert tokenize_words("Don't re-use it") == ["don't", "re-use", "it"]

    def test_edge_joiners_are_trimmed(self):
        assert tokenize_words("'quoted' -dash-") == ["quoted", "dash"]

    def test_numbers_are_not_words(self):
        assert tokenize_words("call 555 at 3pm") == ["call", "at", "pm"]

    def test_lowercase_flag(self):
        assert tokenize_words("Hello World", lowercase=False) == ["Hello", "World"]

    def test_devanagari_with_vowel_signs(self):
        words = tokenize_words("मैं बहुत खुश हूँ")
        assert words == ["मैं", "बहुत", "खुश", "हूँ"]

    def test_token_lower(self):
        assert Token("HeLLo", 0, 5).lower == "hello"


class TestSentencesAndCounts:
    """Tests for split_sentences and count_words."""

    def test_split_on_terminators_and_newlines(self):
        text = "First one. Second one!  Third?\nFourth"
        assert split_sentences(text) == ["First one", "Second one", "Third", "Fourth"]

    def test_repeated_terminators_yield_no_empty_pieces(self):
        assert split_sentences("Wait... what?!") == ["Wait", "what"]

    def test_split_empty(self):
        assert split_sentences("") == []
        assert split_sentences(" . ! ") == []

    def test_count_words_is_whitespace_split(self):
        assert count_words("one  two\tthree 4") == 4
        assert count_words("") == 0


class TestStopwords:
    """Tests for stop-word tables."""

    def test_english_table(self):
        assert "the" in get_stopwords("en")
        assert get_stopwords("EN") is STOP_WORDS_EN

    def test_hindi_table(self):
        assert "है" in get_stopwords("hi")

    @pytest.mark.parametrize("language", ["fr", "", "xx"])
    def test_unsupported_language_filters_nothing(self, language):
        assert get_stopwords(language) == frozenset()
        assert filter_stopwords(["the", "cat"], language) == ["the", "cat"]

    def test_language_table_is_read_only(self):
        with pytest.raises(TypeError):
            nlp_utils._STOP_WORDS_BY_LANGUAGE["fr"] = frozenset({"le"})
        assert get_stopwords("fr") == frozenset()

    def test_filter_stopwords(self):
        assert filter_stopwords(["the", "cat", "and", "dog"]) == ["cat", "dog"]

    def test_has_meaningful_content(self):
        assert has_meaningful_content("The budget review")
        assert not has_meaningful_content("the and of")
        assert not has_meaningful_content("   ")
        assert not has_meaningful_content("budget", min_words=2)

    def test_strip_non_word_chars(self):
        assert strip_non_word_chars("hello!!") == "hello"
        assert strip_non_word_chars("it's-ok?") == "it's-ok"


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, digits, expected",
        [
            (1.25, 1, 1.3),
            (0.125, 2, 0.13),
            (2.5, 0, 3.0),
            (33.3333, 2, 33.33),
            (-1.25, 1, -1.2),
        ],
    )
    def test_halves_round_up(self, value, digits, expected):
        assert round_half_up(value, digits) == pytest.approx(expected)
