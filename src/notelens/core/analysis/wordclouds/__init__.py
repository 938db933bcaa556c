"""Word cloud analysis package."""

from notelens.core.analysis.wordclouds.analysis import (
    WordCloudAnalysis,
    calculate_word_frequency,
    extract_topics,
    generate_color,
    generate_word_cloud,
    get_top_keywords,
    get_word_stats,
    has_enough_content_for_word_cloud,
    normalize_to_size_scale,
    tokenize_for_cloud,
)
from notelens.core.analysis.wordclouds.models import WordCloudData, WordCloudItem, WordStats

__all__ = [
    "WordCloudAnalysis",
    "WordCloudData",
    "WordCloudItem",
    "WordStats",
    "calculate_word_frequency",
    "extract_topics",
    "generate_color",
    "generate_word_cloud",
    "get_top_keywords",
    "get_word_stats",
    "has_enough_content_for_word_cloud",
    "normalize_to_size_scale",
    "tokenize_for_cloud",
]
