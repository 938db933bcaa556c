"""
Tests for word cloud generation.
"""

from notelens.core.analysis.wordclouds import (
    WordCloudAnalysis,
    WordCloudData,
    extract_topics,
    generate_color,
    generate_word_cloud,
    get_top_keywords,
    get_word_stats,
    has_enough_content_for_word_cloud,
    normalize_to_size_scale,
    tokenize_for_cloud,
)
from collections import Counter


class TestGenerateWordCloud:
    def test_frequencies_sizes_and_colors(self):
        data = generate_word_cloud("budget budget budget review review plan")
        assert [(i.word, i.frequency, i.size) for i in data.words] == [
            ("budget", 3, 5.0),
            ("review", 2, 3.0),
            ("plan", 1, 1.0),
        ]
        assert [i.color for i in data.words] == ["#EF4444", "#EC4899", "#3B82F6"]
        assert data.total_words == 6
        assert data.unique_words == 3

    def test_empty(self):
        data = generate_word_cloud("")
        assert data.words == []
        assert data.total_words == 0

    def test_stop_words_and_short_words_removed(self):
        data = generate_word_cloud("The cat and the dog go to it")
        assert [i.word for i in data.words] == ["cat", "dog"]

    def test_single_frequency_gets_size_one(self):
        data = generate_word_cloud("budget")
        assert data.words[0].size == 1.0

    def test_punctuation_stripped(self):
        data = generate_word_cloud("budget, budget! (budget)")
        assert [(i.word, i.frequency) for i in data.words] == [("budget", 3)]

    def test_ties_keep_first_seen_order(self):
        data = generate_word_cloud("zeta alpha zeta alpha")
        assert [i.word for i in data.words] == ["zeta", "alpha"]

    def test_max_words(self):
        data = generate_word_cloud("apple banana cherry damson elder", max_words=2)
        assert len(data.words) == 2
        assert data.unique_words == 5

    def test_hindi_stop_words(self):
        data = generate_word_cloud("मैं बहुत खुश हूँ", language="hi")
        assert [i.word for i in data.words] == ["बहुत", "खुश", "हूँ"]

    def test_unsupported_language_keeps_every_word(self):
        data = generate_word_cloud("le chat le", language="fr")
        assert [(i.word, i.frequency) for i in data.words] == [("le", 2), ("chat", 1)]

    def test_to_dict(self):
        payload = generate_word_cloud("budget review").to_dict()
        assert set(payload) == {"words", "total_words", "unique_words"}
        assert set(payload["words"][0]) == {"word", "frequency", "size", "color"}


class TestHelpers:
    def test_tokenize_for_cloud_min_length(self):
        assert tokenize_for_cloud("go big or go home") == ["big", "home"]
        assert tokenize_for_cloud("go big", language="fr") == ["go", "big"]

    def test_normalize_empty(self):
        assert normalize_to_size_scale(Counter()) == {}

    def test_normalize_rounds_halves_up(self):
        sizes = normalize_to_size_scale(Counter({"alpha": 17, "beta": 2, "gamma": 1}))
        assert sizes == {"alpha": 5.0, "beta": 1.3, "gamma": 1.0}

    def test_generate_color_buckets(self):
        assert generate_color(1.0) == "#3B82F6"
        assert generate_color(4.9) == "#F59E0B"
        assert generate_color(5.0) == "#EF4444"

    def test_keywords_and_topics(self):
        data = generate_word_cloud("alpha alpha alpha beta beta gamma delta")
        assert get_top_keywords(data, 2) == ["alpha", "beta"]
        assert extract_topics(data) == ["alpha", "beta", "gamma"]

    def test_word_stats(self):
        stats = get_word_stats(generate_word_cloud("alpha alpha beta"))
        assert stats.max_frequency == 2
        assert stats.min_frequency == 1
        assert stats.average_frequency == 1.5

    def test_word_stats_empty(self):
        assert get_word_stats(WordCloudData()).max_frequency == 0

    def test_has_enough_content(self):
        assert not has_enough_content_for_word_cloud("word " * 19)
        assert has_enough_content_for_word_cloud("word " * 20)
        assert has_enough_content_for_word_cloud("शब्द " * 10, language="hi")


class TestWordCloudAnalysisModule:
    def test_module_options(self):
        data = WordCloudAnalysis({"max_words": 1}).run("alpha alpha beta")
        assert [i.word for i in data.words] == ["alpha"]

    def test_empty_result(self):
        assert WordCloudAnalysis().empty_result().words == []
