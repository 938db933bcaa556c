"""
Filler-word detection, removal and highlighting (pure logic, no I/O).

Phrase matches and single-word matches are merged by start offset and swept
once: a match is kept unless it starts inside an already kept match. Phrases
come first in the merge so they win over a single word at the same start.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from notelens.core.analysis.fillers.lexicon import (
    FILLER_PHRASES,
    SINGLE_WORD_FILLERS,
    FillerCategory,
)
from notelens.core.utils.config import get_config
from notelens.core.utils.nlp_utils import (
    count_words,
    is_word_char,
    round_half_up,
    split_sentences,
    tokenize,
)

_PHRASE_PATTERNS = tuple(
    (phrase, re.compile(r"\s+".join(map(re.escape, phrase.split())), re.IGNORECASE))
    for phrase in FILLER_PHRASES
)

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class FillerWord:
    word: str
    start: int
    end: int
    category: FillerCategory

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "start": self.start,
            "end": self.end,
            "category": self.category.value,
        }


@dataclass(frozen=True)
class HighlightSegment:
    text: str
    is_filler: bool
    category: FillerCategory | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "is_filler": self.is_filler,
            "category": self.category.value if self.category else None,
        }


@dataclass
class FillerWordAnalysis:
    original_text: str
    cleaned_text: str
    highlighted_segments: list[HighlightSegment] = field(default_factory=list)
    filler_words: list[FillerWord] = field(default_factory=list)
    total_filler_words: int = 0
    filler_word_percentage: float = 0.0
    most_common_filler: str | None = None
    filler_word_frequency: dict[str, int] = field(default_factory=dict)
    average_filler_words_per_sentence: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "original_text": self.original_text,
            "cleaned_text": self.cleaned_text,
            "highlighted_segments": [s.to_dict() for s in self.highlighted_segments],
            "filler_words": [f.to_dict() for f in self.filler_words],
            "total_filler_words": self.total_filler_words,
            "filler_word_percentage": self.filler_word_percentage,
            "most_common_filler": self.most_common_filler,
            "filler_word_frequency": dict(self.filler_word_frequency),
            "average_filler_words_per_sentence": self.average_filler_words_per_sentence,
        }


@dataclass
class FillerWordStatistics:
    total_filler_words: int = 0
    average_filler_percentage: float = 0.0
    most_common_filler: str | None = None
    filler_word_frequency: dict[str, int] = field(default_factory=dict)
    transcriptions_analyzed: int = 0
    average_filler_words_per_transcript: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_filler_words": self.total_filler_words,
            "average_filler_percentage": self.average_filler_percentage,
            "most_common_filler": self.most_common_filler,
            "filler_word_frequency": dict(self.filler_word_frequency),
            "transcriptions_analyzed": self.transcriptions_analyzed,
            "average_filler_words_per_transcript": self.average_filler_words_per_transcript,
        }


def empty_filler_analysis(text: str = "") -> FillerWordAnalysis:
    return FillerWordAnalysis(original_text=text, cleaned_text="")


def _on_word_boundary(text: str, start: int, end: int) -> bool:
    before = start == 0 or not is_word_char(text[start - 1])
    after = end == len(text) or not is_word_char(text[end])
    return before and after


def find_filler_phrases(text: str) -> list[FillerWord]:
    """
    Case-insensitive scan for multi-word filler phrases.

    A match must sit on word boundaries, so "i mean" does not match "I meant".
    """
    matches: list[FillerWord] = []
    for _, pattern in _PHRASE_PATTERNS:
        for m in pattern.finditer(text):
            if _on_word_boundary(text, m.start(), m.end()):
                matches.append(FillerWord(m.group(0), m.start(), m.end(), FillerCategory.PHRASE))
    return matches


def find_single_word_fillers(text: str) -> list[FillerWord]:
    return [
        FillerWord(token.text, token.start, token.end, SINGLE_WORD_FILLERS[token.lower])
        for token in tokenize(text)
        if token.lower in SINGLE_WORD_FILLERS
    ]


def merge_fillers(matches: Iterable[FillerWord]) -> list[FillerWord]:
    """
    Resolve overlaps: sort by start (stable) and keep a match only if it does
    not start inside a kept one.
    """
    kept: list[FillerWord] = []
    kept_end = -1
    for match in sorted(matches, key=lambda m: m.start):
        if match.start < kept_end:
            continue
        kept.append(match)
        kept_end = max(kept_end, match.end)
    return kept


def build_cleaned_text(text: str, fillers: Sequence[FillerWord]) -> str:
    """Replace each filler span with a space (last first), collapse whitespace."""
    cleaned = text
    for filler in reversed(fillers):
        cleaned = cleaned[: filler.start] + " " + cleaned[filler.end :]
    return _WHITESPACE.sub(" ", cleaned).strip()


def build_highlighted_segments(
    text: str, fillers: Sequence[FillerWord]
) -> list[HighlightSegment]:
    """Alternating plain/filler segments covering the whole text in order."""
    segments: list[HighlightSegment] = []
    last_end = 0
    for filler in fillers:
        if last_end < filler.start:
            segments.append(HighlightSegment(text[last_end : filler.start], False))
        segments.append(HighlightSegment(text[filler.start : filler.end], True, filler.category))
        last_end = filler.end
    if last_end < len(text):
        segments.append(HighlightSegment(text[last_end:], False))
    return segments


def _most_common(frequency: dict[str, int]) -> str | None:
    # First-seen key wins ties
    best, best_count = None, 0
    for word, count in frequency.items():
        if count > best_count:
            best, best_count = word, count
    return best


def analyze_filler_words(
    text: str, categories: Iterable[FillerCategory | str] | None = None
) -> FillerWordAnalysis:
    """
    Detect filler words and phrases.

    Args:
        text: Transcript text
        categories: Categories to detect (default from config: all)

    Returns:
        FillerWordAnalysis; the all-zero result for empty text
    """
    if not text or not text.strip():
        return empty_filler_analysis(text or "")

    enabled = {
        FillerCategory(c)
        for c in (categories if categories is not None else get_config().analysis.fillers.enabled_categories)
    }
    candidates = [
        m
        for m in find_filler_phrases(text) + find_single_word_fillers(text)
        if m.category in enabled
    ]
    fillers = merge_fillers(candidates)

    frequency: dict[str, int] = {}
    for filler in fillers:
        key = " ".join(filler.word.lower().split())
        frequency[key] = frequency.get(key, 0) + 1

    total_words = count_words(text)
    sentence_count = len(split_sentences(text))
    percentage = len(fillers) / total_words * 100 if total_words else 0.0
    per_sentence = len(fillers) / sentence_count if sentence_count else 0.0

    return FillerWordAnalysis(
        original_text=text,
        cleaned_text=build_cleaned_text(text, fillers),
        highlighted_segments=build_highlighted_segments(text, fillers),
        filler_words=fillers,
        total_filler_words=len(fillers),
        filler_word_percentage=round_half_up(percentage, 2),
        most_common_filler=_most_common(frequency),
        filler_word_frequency=frequency,
        average_filler_words_per_sentence=round_half_up(per_sentence, 2),
    )


def remove_filler_words(text: str) -> str:
    return analyze_filler_words(text).cleaned_text


def get_filler_word_statistics(transcriptions: Sequence[str]) -> FillerWordStatistics:
    """Combined filler statistics across several transcripts."""
    if not transcriptions:
        return FillerWordStatistics()

    total = 0
    total_percentage = 0.0
    combined: Counter = Counter()
    for text in transcriptions:
        analysis = analyze_filler_words(text)
        total += analysis.total_filler_words
        total_percentage += analysis.filler_word_percentage
        combined.update(analysis.filler_word_frequency)

    count = len(transcriptions)
    frequency = dict(combined)
    return FillerWordStatistics(
        total_filler_words=total,
        average_filler_percentage=round_half_up(total_percentage / count, 2),
        most_common_filler=_most_common(frequency),
        filler_word_frequency=frequency,
        transcriptions_analyzed=count,
        average_filler_words_per_transcript=round_half_up(total / count, 2),
    )
