"""
Sentence similarity utilities for NoteLens.

Centrality scores how representative each sentence is of the whole document:
the sum of cosine similarities between a sentence's term-frequency vector and
every other sentence's. Cost is quadratic in the number of sentences.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from notelens.utils.error_handling import degrade_gracefully


def _zero_centrality(sentences: Sequence[str], *args, **kwargs) -> np.ndarray:
    return np.zeros(len(sentences), dtype=float)


@degrade_gracefully(_zero_centrality, module="similarity")
def sentence_centrality(
    sentences: Sequence[str], analyzer: Callable[[str], list[str]]
) -> np.ndarray:
    """
    Compute the centrality of each sentence.

    Args:
        sentences: Sentences in document order
        analyzer: Callable turning a sentence into its terms (already
            lowercased and stop-word filtered)

    Returns:
        Array of length ``len(sentences)``. Sentences with no terms, and any
        degenerate input (one sentence, empty vocabulary), score 0.
    """
    if len(sentences) < 2:
        return np.zeros(len(sentences), dtype=float)

    vectorizer = CountVectorizer(analyzer=analyzer)
    # Raises ValueError on an empty vocabulary; handled by degrade_gracefully
    matrix = vectorizer.fit_transform(sentences)
    similarity = cosine_similarity(matrix)
    np.fill_diagonal(similarity, 0.0)
    return np.nan_to_num(similarity.sum(axis=1))


def normalize_scores(scores: Sequence[float] | np.ndarray) -> np.ndarray:
    """Scale non-negative scores into [0, 1] by dividing by the maximum."""
    values = np.asarray(scores, dtype=float)
    if values.size == 0:
        return values
    peak = values.max()
    if peak <= 0:
        return np.zeros_like(values)
    return values / peak
