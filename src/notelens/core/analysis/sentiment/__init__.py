"""
Sentiment Analysis Module for NoteLens.

Lexicon scoring with intensifiers and hedged negation, per document and per
sentence, plus aggregation across a note collection.
"""

from __future__ import annotations

from typing import Any

from notelens.core.analysis.base import AnalysisModule
from notelens.core.analysis.sentiment.core import (
    KeyPhrase,
    SentenceSentiment,
    SentimentAnalysis,
    SentimentLabel,
    SentimentScore,
    SentimentTrends,
    analyze_sentiment,
    analyze_sentiment_trends,
    calculate_sentiment,
    classify_sentiment,
    empty_sentiment,
    extract_key_phrases,
    get_emotional_tone,
)


class SentimentAnalyzer(AnalysisModule):
    """Lexicon sentiment: compound score, label, confidence and key phrases."""

    name = "sentiment"

    def analyze(self, text: str, **kwargs: Any) -> SentimentAnalysis:
        return analyze_sentiment(text)

    def empty_result(self) -> SentimentAnalysis:
        return empty_sentiment()


__all__ = [
    "KeyPhrase",
    "SentenceSentiment",
    "SentimentAnalysis",
    "SentimentAnalyzer",
    "SentimentLabel",
    "SentimentScore",
    "SentimentTrends",
    "analyze_sentiment",
    "analyze_sentiment_trends",
    "calculate_sentiment",
    "classify_sentiment",
    "empty_sentiment",
    "extract_key_phrases",
    "get_emotional_tone",
]
