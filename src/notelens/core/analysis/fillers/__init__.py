"""Filler-word detection package."""

from __future__ import annotations

from typing import Any

from notelens.core.analysis.base import AnalysisModule
from notelens.core.analysis.fillers.core import (
    FillerWord,
    FillerWordAnalysis,
    FillerWordStatistics,
    HighlightSegment,
    analyze_filler_words,
    build_cleaned_text,
    build_highlighted_segments,
    empty_filler_analysis,
    find_filler_phrases,
    find_single_word_fillers,
    get_filler_word_statistics,
    merge_fillers,
    remove_filler_words,
)
from notelens.core.analysis.fillers.lexicon import (
    CATEGORY_COLORS,
    FILLER_PHRASES,
    SINGLE_WORD_FILLERS,
    FillerCategory,
    get_category_description,
)


class FillerWordDetector(AnalysisModule):
    """Filler words and phrases with cleaned and highlighted text."""

    name = "fillers"

    def analyze(self, text: str, **kwargs: Any) -> FillerWordAnalysis:
        return analyze_filler_words(text, **self.options(**kwargs))

    def empty_result(self) -> FillerWordAnalysis:
        return empty_filler_analysis()


__all__ = [
    "CATEGORY_COLORS",
    "FILLER_PHRASES",
    "SINGLE_WORD_FILLERS",
    "FillerCategory",
    "FillerWord",
    "FillerWordAnalysis",
    "FillerWordDetector",
    "FillerWordStatistics",
    "HighlightSegment",
    "analyze_filler_words",
    "build_cleaned_text",
    "build_highlighted_segments",
    "empty_filler_analysis",
    "find_filler_phrases",
    "find_single_word_fillers",
    "get_category_description",
    "get_filler_word_statistics",
    "merge_fillers",
    "remove_filler_words",
]
