"""
Tests for sentence centrality and score normalization.
"""

import numpy as np

from notelens.core.utils.similarity_utils import normalize_scores, sentence_centrality


def _words(sentence: str) -> list[str]:
    return sentence.lower().split()


class TestSentenceCentrality:
    def test_single_sentence_is_zero(self):
        assert sentence_centrality(["only one"], _words).tolist() == [0.0]

    def test_shared_terms_raise_centrality(self):
        sentences = ["budget review today", "budget review tomorrow", "walk the dog"]
        scores = sentence_centrality(sentences, _words)
        assert len(scores) == 3
        assert scores[0] > scores[2]
        assert scores[1] > scores[2]
        assert scores[2] == 0.0

    def test_empty_vocabulary_degrades_to_zeros(self):
        scores = sentence_centrality(["a", "b"], lambda s: [])
        assert scores.tolist() == [0.0, 0.0]


class TestNormalizeScores:
    def test_divides_by_max(self):
        assert normalize_scores([1.0, 2.0, 4.0]).tolist() == [0.25, 0.5, 1.0]

    def test_all_zero(self):
        assert normalize_scores([0.0, 0.0]).tolist() == [0.0, 0.0]

    def test_empty(self):
        assert normalize_scores(np.array([])).size == 0
