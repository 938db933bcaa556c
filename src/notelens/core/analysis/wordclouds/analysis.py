# notelens/core/analysis/wordclouds/analysis.py

"""
Keyword and word cloud generation for NoteLens.

Words are lowercased, stripped to letters, marks, apostrophes and hyphens,
length-filtered and stop-word filtered per language, then counted. The most
frequent words are scaled to a 1-5 size and colored by size bucket.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from notelens.core.analysis.base import AnalysisModule
from notelens.core.analysis.wordclouds.models import WordCloudData, WordCloudItem, WordStats
from notelens.core.utils.config import DEFAULT_LANGUAGE, WORDCLOUD_COLORS, get_config
from notelens.core.utils.logger import log_debug
from notelens.core.utils.nlp_utils import get_stopwords, round_half_up, strip_non_word_chars


def _min_word_length(language: str) -> int:
    cfg = get_config().analysis.wordcloud
    if language == DEFAULT_LANGUAGE:
        return cfg.min_word_length_default
    return cfg.min_word_length_other


def tokenize_for_cloud(text: str, language: str = DEFAULT_LANGUAGE) -> list[str]:
    """Lowercased words that pass the language's minimum length."""
    if not text:
        return []
    min_length = _min_word_length(language)
    words = (strip_non_word_chars(w).strip() for w in text.lower().split())
    return [w for w in words if len(w) >= min_length]


def calculate_word_frequency(words: list[str], language: str = DEFAULT_LANGUAGE) -> Counter:
    stopwords = get_stopwords(language)
    return Counter(w for w in words if w not in stopwords)


def normalize_to_size_scale(frequency: Counter) -> dict[str, float]:
    """
    Min-max scale frequencies to 1-5, rounded to one decimal.

    When every frequency is equal the range is treated as 1, so every size is 1.
    """
    if not frequency:
        return {}
    max_freq = max(frequency.values())
    min_freq = min(frequency.values())
    spread = (max_freq - min_freq) or 1
    return {
        word: round_half_up((freq - min_freq) / spread * 4 + 1, 1)
        for word, freq in frequency.items()
    }


def generate_color(size: float) -> str:
    index = min(max(int(size) - 1, 0), len(WORDCLOUD_COLORS) - 1)
    return WORDCLOUD_COLORS[index]


def generate_word_cloud(
    text: str, max_words: int | None = None, language: str | None = None
) -> WordCloudData:
    """
    Generate word cloud data from a transcript.

    Args:
        text: Transcript text
        max_words: Number of words to keep (default from config)
        language: Stop-word ruleset; unsupported languages filter nothing

    Returns:
        WordCloudData with the top words in descending frequency
    """
    cfg = get_config().analysis.wordcloud
    limit = cfg.max_words if max_words is None else max_words
    language = (language or cfg.default_language).lower()

    words = tokenize_for_cloud(text, language)
    frequency = calculate_word_frequency(words, language)
    sizes = normalize_to_size_scale(frequency)

    # most_common is a stable sort: equal counts keep first-seen order
    items = [
        WordCloudItem(word=word, frequency=freq, size=sizes[word], color=generate_color(sizes[word]))
        for word, freq in frequency.most_common(max(limit, 0))
    ]
    log_debug("WORDCLOUD", f"{len(items)} words from {len(words)} tokens", f"language={language}")
    return WordCloudData(words=items, total_words=len(words), unique_words=len(frequency))


def get_top_keywords(data: WordCloudData, limit: int = 5) -> list[str]:
    return [item.word for item in data.words[:limit]]


def get_word_stats(data: WordCloudData) -> WordStats:
    if not data.words:
        return WordStats()
    frequencies = [item.frequency for item in data.words]
    return WordStats(
        average_frequency=round_half_up(sum(frequencies) / len(frequencies), 1),
        max_frequency=max(frequencies),
        min_frequency=min(frequencies),
    )


def extract_topics(data: WordCloudData) -> list[str]:
    """Top three keywords."""
    return get_top_keywords(data, 3)


def has_enough_content_for_word_cloud(text: str, language: str | None = None) -> bool:
    """True when the text has enough words for a meaningful cloud."""
    cfg = get_config().analysis.wordcloud
    language = (language or cfg.default_language).lower()
    threshold = (
        cfg.min_content_default if language == DEFAULT_LANGUAGE else cfg.min_content_other
    )
    return len(tokenize_for_cloud(text, language)) >= threshold


class WordCloudAnalysis(AnalysisModule):
    """Stop-word filtered keyword frequencies scaled for a word cloud."""

    name = "wordcloud"

    def analyze(self, text: str, **kwargs: Any) -> WordCloudData:
        return generate_word_cloud(text, **self.options(**kwargs))

    def empty_result(self) -> WordCloudData:
        return WordCloudData()
