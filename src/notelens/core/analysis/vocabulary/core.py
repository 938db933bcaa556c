"""Vocabulary statistics over a note collection (pure logic, no I/O)."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from notelens.core.models import Note
from notelens.core.utils.config import get_config
from notelens.core.utils.nlp_utils import (
    STOP_WORDS_EN,
    round_half_up,
    split_sentences,
    tokenize_words,
)

VOWELS = frozenset("aeiouy")


@dataclass(frozen=True)
class WordCount:
    word: str
    frequency: int

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "frequency": self.frequency}


@dataclass
class VocabularyInsights:
    total_words: int = 0
    unique_words: int = 0
    unique_meaningful_words: int = 0
    vocabulary_richness: float = 0.0
    average_sentence_length: float = 0.0
    average_word_length: float = 0.0
    total_sentences: int = 0
    most_common_words: list[WordCount] = field(default_factory=list)
    rare_words: list[WordCount] = field(default_factory=list)
    readability_index: float = 0.0
    longest_word: str = ""
    shortest_word: str = ""
    notes_analyzed: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_words": self.total_words,
            "unique_words": self.unique_words,
            "unique_meaningful_words": self.unique_meaningful_words,
            "vocabulary_richness": self.vocabulary_richness,
            "average_sentence_length": self.average_sentence_length,
            "average_word_length": self.average_word_length,
            "total_sentences": self.total_sentences,
            "most_common_words": [w.to_dict() for w in self.most_common_words],
            "rare_words": [w.to_dict() for w in self.rare_words],
            "readability_index": self.readability_index,
            "longest_word": self.longest_word,
            "shortest_word": self.shortest_word,
            "notes_analyzed": self.notes_analyzed,
        }


@dataclass
class VocabularyComparison:
    unique_words_growth: float = 0.0
    total_words_growth: float = 0.0
    richness_trend: str = "stable"
    sentence_length_trend: str = "stable"

    def to_dict(self) -> dict[str, Any]:
        return {
            "unique_words_growth": self.unique_words_growth,
            "total_words_growth": self.total_words_growth,
            "richness_trend": self.richness_trend,
            "sentence_length_trend": self.sentence_length_trend,
        }


def estimate_syllables(word: str) -> int:
    """
    Count vowel groups, minus one for a silent trailing ``e``, plus one for
    a ``-le`` ending. Never less than one.
    """
    lower = word.lower()
    count = 0
    previous_was_vowel = False
    for ch in lower:
        is_vowel = ch in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel
    if lower.endswith("e"):
        count -= 1
    if lower.endswith("le") and len(lower) > 2:
        count += 1
    return max(1, count)


def estimate_average_syllables(words: Sequence[str]) -> float:
    return sum(estimate_syllables(w) for w in words) / (len(words) or 1)


def readability_index(average_sentence_length: float, average_syllables: float) -> float:
    """Flesch-Kincaid grade estimate, floored at zero."""
    return max(0.0, 0.39 * average_sentence_length + 11.8 * average_syllables - 15.59)


def _texts(notes: Sequence[Note | str]) -> list[str]:
    return [n if isinstance(n, str) else n.transcription for n in notes]


def analyze_vocabulary(notes: Sequence[Note | str]) -> VocabularyInsights:
    """
    Vocabulary statistics over every transcript in ``notes``.

    Richness is unique words over total words, so a transcript of all-distinct
    words has richness 1.0. Common, rare, longest and shortest words ignore
    words of two letters or fewer unless nothing else is left.
    """
    texts = _texts(notes)
    if not texts:
        return VocabularyInsights()

    cfg = get_config().analysis.vocabulary
    combined = " ".join(texts)
    words = tokenize_words(combined)
    if not words:
        return VocabularyInsights(notes_analyzed=len(texts))

    sentences = split_sentences(combined)
    frequency = Counter(words)
    candidates = Counter({w: c for w, c in frequency.items() if len(w) > 2}) or frequency
    ranked = candidates.most_common()

    total = len(words)
    average_sentence_length = total / (len(sentences) or 1)
    average_word_length = sum(len(w) for w in words) / total

    return VocabularyInsights(
        total_words=total,
        unique_words=len(frequency),
        unique_meaningful_words=sum(1 for w in frequency if w not in STOP_WORDS_EN),
        vocabulary_richness=round_half_up(len(frequency) / total, 3),
        average_sentence_length=round_half_up(average_sentence_length, 1),
        average_word_length=round_half_up(average_word_length, 1),
        total_sentences=len(sentences),
        most_common_words=[WordCount(w, c) for w, c in ranked[: cfg.top_n]],
        rare_words=[
            WordCount(w, c) for w, c in ranked if c <= cfg.rare_max_frequency
        ][: cfg.top_n],
        readability_index=round_half_up(
            readability_index(average_sentence_length, estimate_average_syllables(words)), 1
        ),
        longest_word=max(candidates, key=len),
        shortest_word=min(candidates, key=len),
        notes_analyzed=len(texts),
    )


def get_vocabulary_level(richness: float) -> str:
    if richness > 0.7:
        return "Excellent - Very diverse vocabulary"
    if richness > 0.5:
        return "Good - Solid vocabulary range"
    if richness > 0.3:
        return "Moderate - Fair vocabulary diversity"
    return "Limited - Consider using more varied words"


def get_readability_level(index: float) -> str:
    if index < 6:
        return "Easy - Elementary school level"
    if index < 9:
        return "Moderate - Middle school level"
    if index < 13:
        return "Good - High school level"
    if index < 16:
        return "Complex - College level"
    return "Very Complex - Graduate level"


def _growth(current: int, previous: int) -> float:
    if previous <= 0:
        return 0.0
    return round_half_up((current - previous) / previous * 100, 1)


def compare_vocabulary(
    current: VocabularyInsights, previous: VocabularyInsights | None
) -> VocabularyComparison:
    """
    Trend between two analyses.

    Richness moves by more than the richness threshold (0.02) and sentence
    length by more than the sentence threshold (1 word) to count as a trend.
    """
    if previous is None:
        return VocabularyComparison()

    cfg = get_config().analysis.vocabulary
    richness_diff = current.vocabulary_richness - previous.vocabulary_richness
    if richness_diff > cfg.richness_trend_threshold:
        richness_trend = "improving"
    elif richness_diff < -cfg.richness_trend_threshold:
        richness_trend = "declining"
    else:
        richness_trend = "stable"

    sentence_diff = current.average_sentence_length - previous.average_sentence_length
    if sentence_diff > cfg.sentence_length_trend_threshold:
        sentence_trend = "getting_longer"
    elif sentence_diff < -cfg.sentence_length_trend_threshold:
        sentence_trend = "getting_shorter"
    else:
        sentence_trend = "stable"

    return VocabularyComparison(
        unique_words_growth=_growth(current.unique_words, previous.unique_words),
        total_words_growth=_growth(current.total_words, previous.total_words),
        richness_trend=richness_trend,
        sentence_length_trend=sentence_trend,
    )


def get_vocabulary_summary(insights: VocabularyInsights) -> str:
    return "\n".join(
        [
            f"Vocabulary Analysis ({insights.notes_analyzed} notes):",
            f"- Total Words: {insights.total_words}",
            f"- Unique Words: {insights.unique_words}",
            f"- Vocabulary Richness: {insights.vocabulary_richness * 100:.1f}%",
            f"- Avg Sentence: {insights.average_sentence_length} words",
            f"- Avg Word: {insights.average_word_length} letters",
            f"- Readability: {get_readability_level(insights.readability_index)}",
        ]
    )
