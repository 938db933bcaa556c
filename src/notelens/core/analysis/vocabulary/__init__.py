"""Vocabulary analysis package."""

from __future__ import annotations

from typing import Any

from notelens.core.analysis.base import AnalysisModule
from notelens.core.analysis.vocabulary.core import (
    VocabularyComparison,
    VocabularyInsights,
    WordCount,
    analyze_vocabulary,
    compare_vocabulary,
    estimate_syllables,
    get_readability_level,
    get_vocabulary_level,
    get_vocabulary_summary,
    readability_index,
)


class VocabularyAnalyzer(AnalysisModule):
    """Richness, readability and word-usage statistics."""

    name = "vocabulary"

    def analyze(self, text: str, **kwargs: Any) -> VocabularyInsights:
        return analyze_vocabulary([text])

    def empty_result(self) -> VocabularyInsights:
        return VocabularyInsights()


__all__ = [
    "VocabularyAnalyzer",
    "VocabularyComparison",
    "VocabularyInsights",
    "WordCount",
    "analyze_vocabulary",
    "compare_vocabulary",
    "estimate_syllables",
    "get_readability_level",
    "get_vocabulary_level",
    "get_vocabulary_summary",
    "readability_index",
]
