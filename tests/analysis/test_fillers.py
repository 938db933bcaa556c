"""
Tests for filler-word detection, removal and highlighting.
"""

import pytest

from notelens.core.analysis.fillers import (
    FillerCategory,
    FillerWord,
    FillerWordDetector,
    analyze_filler_words,
    get_category_description,
    get_filler_word_statistics,
    merge_fillers,
    remove_filler_words,
)


class TestAnalyzeFillerWords:
    def test_empty_text(self):
        result = analyze_filler_words("")
        assert result.original_text == ""
        assert result.cleaned_text == ""
        assert result.total_filler_words == 0
        assert result.most_common_filler is None
        assert result.highlighted_segments == []

    def test_phrase_and_single_word(self):
        result = analyze_filler_words("Um I think we should go")
        assert [(f.word, f.category) for f in result.filler_words] == [
            ("Um", FillerCategory.VERBAL),
            ("I think", FillerCategory.PHRASE),
        ]
        assert result.cleaned_text == "we should go"
        assert result.filler_word_frequency == {"um": 1, "i think": 1}
        # First-seen filler wins the tie
        assert result.most_common_filler == "um"
        assert result.filler_word_percentage == 33.33
        assert result.average_filler_words_per_sentence == 2.0

    def test_longest_phrase_wins(self):
        result = analyze_filler_words("you know what i mean")
        assert [f.word for f in result.filler_words] == ["you know what i mean"]
        assert result.cleaned_text == ""

    def test_phrase_requires_word_boundary(self):
        result = analyze_filler_words("I meant it")
        assert result.total_filler_words == 0
        assert result.cleaned_text == "I meant it"

        # The same words without the trailing letter are a filler phrase
        matched = analyze_filler_words("I mean it")
        assert [f.word for f in matched.filler_words] == ["I mean"]
        assert matched.cleaned_text == "it"

    def test_single_word_not_matched_inside_words(self):
        assert analyze_filler_words("Also the umbrella is here").total_filler_words == 0

    def test_case_and_whitespace_normalized_in_frequency(self):
        result = analyze_filler_words("UM you   know, um")
        assert result.filler_word_frequency == {"um": 2, "you know": 1}
        assert result.most_common_filler == "um"

    def test_punctuation_is_left_in_place(self):
        result = analyze_filler_words("Um, so I was, like, thinking about the project.")
        assert result.cleaned_text == ", I was, , thinking about the project."

    def test_offsets_match_text(self, filler_transcript):
        result = analyze_filler_words(filler_transcript)
        for filler in result.filler_words:
            assert filler_transcript[filler.start:filler.end] == filler.word

    def test_highlighted_segments_cover_text(self, filler_transcript):
        result = analyze_filler_words(filler_transcript)
        assert "".join(s.text for s in result.highlighted_segments) == filler_transcript
        fillers = [s for s in result.highlighted_segments if s.is_filler]
        assert len(fillers) == result.total_filler_words
        assert all(s.category is not None for s in fillers)

    def test_highlighted_segment_layout(self):
        result = analyze_filler_words("Um I think we should go")
        assert [(s.text, s.is_filler) for s in result.highlighted_segments] == [
            ("Um", True),
            (" ", False),
            ("I think", True),
            (" we should go", False),
        ]

    def test_category_filter(self):
        result = analyze_filler_words("Um, like, whatever", categories=["verbal"])
        assert [f.word for f in result.filler_words] == ["Um"]

    def test_to_dict(self):
        payload = analyze_filler_words("uh okay").to_dict()
        assert payload["filler_words"][0]["category"] == "verbal"
        assert payload["filler_words"][1]["category"] == "discourse"


class TestMergeFillers:
    def test_overlaps_dropped(self):
        phrase = FillerWord("i mean", 0, 6, FillerCategory.PHRASE)
        inner = FillerWord("mean", 2, 6, FillerCategory.DISCOURSE)
        later = FillerWord("so", 7, 9, FillerCategory.DISCOURSE)
        assert merge_fillers([inner, phrase, later]) == [phrase, later]

    def test_same_start_keeps_first(self):
        phrase = FillerWord("so", 0, 2, FillerCategory.PHRASE)
        word = FillerWord("so", 0, 2, FillerCategory.DISCOURSE)
        assert merge_fillers([phrase, word]) == [phrase]


class TestHelpers:
    def test_remove_filler_words(self):
        assert remove_filler_words("well i mean it works") == "it works"

    def test_statistics(self):
        stats = get_filler_word_statistics(["um um", "like"])
        assert stats.total_filler_words == 3
        assert stats.average_filler_percentage == 100.0
        assert stats.filler_word_frequency == {"um": 2, "like": 1}
        assert stats.most_common_filler == "um"
        assert stats.transcriptions_analyzed == 2
        assert stats.average_filler_words_per_transcript == 1.5

    def test_statistics_empty(self):
        stats = get_filler_word_statistics([])
        assert stats.total_filler_words == 0
        assert stats.most_common_filler is None

    @pytest.mark.parametrize(
        "category, description",
        [
            ("verbal", "Verbal Hesitation"),
            (FillerCategory.PHRASE, "Filler Phrase"),
            ("bogus", "Filler Word"),
        ],
    )
    def test_category_description(self, category, description):
        assert get_category_description(category) == description


class TestFillerWordDetectorModule:
    def test_module_categories_option(self):
        detector = FillerWordDetector({"categories": ["discourse"]})
        result = detector.run("Um, basically done")
        assert [f.word for f in result.filler_words] == ["basically"]

    def test_empty(self):
        assert FillerWordDetector().run("").total_filler_words == 0
