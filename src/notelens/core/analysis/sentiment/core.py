"""
Lexicon sentiment scoring (pure logic, no I/O).

Each lexicon hit looks one token back: an intensifier multiplies the word's
intensity, a negation moves half of it into the opposite bucket.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from notelens.core.models import Note
from notelens.core.utils.config import (
    NO_NOTES_CONTENT,
    NO_SENTIMENT_CONTENT,
    SentimentConfig,
    get_config,
)
from notelens.core.utils.nlp_utils import split_sentences, tokenize_words
from notelens.core.analysis.sentiment.lexicon import (
    INTENSIFIERS,
    NEGATIVE_PHRASES,
    NEGATIVE_WORDS,
    POSITIVE_PHRASES,
    POSITIVE_WORDS,
    is_negation,
)


class SentimentLabel(str, Enum):
    # Declaration order breaks ties between equally common labels in trends
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"
    MIXED = "Mixed"


@dataclass
class SentimentScore:
    positive: float = 0.0
    negative: float = 0.0
    neutral: float = 1.0
    compound: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass
class SentenceSentiment:
    text: str
    sentiment: SentimentScore
    label: SentimentLabel

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "sentiment": self.sentiment.to_dict(),
            "label": self.label.value,
        }


@dataclass
class KeyPhrase:
    phrase: str
    sentiment: SentimentLabel
    intensity: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "phrase": self.phrase,
            "sentiment": self.sentiment.value,
            "intensity": self.intensity,
        }


@dataclass
class SentimentAnalysis:
    overall: SentimentScore
    sentiment: SentimentLabel
    confidence: float
    sentences: list[SentenceSentiment] = field(default_factory=list)
    emotional_tone: str = ""
    key_phrases: list[KeyPhrase] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall": self.overall.to_dict(),
            "sentiment": self.sentiment.value,
            "confidence": self.confidence,
            "sentences": [s.to_dict() for s in self.sentences],
            "emotional_tone": self.emotional_tone,
            "key_phrases": [p.to_dict() for p in self.key_phrases],
        }


@dataclass
class SentimentTrends:
    average_sentiment: float
    positive_count: int
    negative_count: int
    neutral_count: int
    mixed_count: int
    overall_tone: str
    most_common_sentiment: SentimentLabel
    sentiment_distribution: dict[str, int]
    average_confidence: float

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["most_common_sentiment"] = self.most_common_sentiment.value
        return payload


def empty_sentiment() -> SentimentAnalysis:
    return SentimentAnalysis(
        overall=SentimentScore(),
        sentiment=SentimentLabel.NEUTRAL,
        confidence=0.0,
        emotional_tone=NO_SENTIMENT_CONTENT,
    )


def calculate_sentiment(text: str, cfg: SentimentConfig | None = None) -> SentimentScore:
    """
    Score a span of text.

    Positive and negative totals are normalized by their sum; ``neutral`` is
    what remains. ``compound`` is ``(pos - neg) / max(pos + neg, 1)``.
    """
    cfg = cfg or get_config().analysis.sentiment
    words = tokenize_words(text)
    positive_total = 0.0
    negative_total = 0.0

    for i, word in enumerate(words):
        if word in POSITIVE_WORDS:
            score, positive = POSITIVE_WORDS[word], True
        elif word in NEGATIVE_WORDS:
            score, positive = NEGATIVE_WORDS[word], False
        else:
            continue

        previous = words[i - 1] if i > 0 else ""
        if previous in INTENSIFIERS:
            score *= INTENSIFIERS[previous]

        if previous and is_negation(previous):
            # Hedged flip: half strength, opposite bucket
            if positive:
                negative_total += score * cfg.negation_factor
            else:
                positive_total += score * cfg.negation_factor
        elif positive:
            positive_total += score
        else:
            negative_total += score

    total = positive_total + negative_total
    positive = positive_total / total if total > 0 else 0.0
    negative = negative_total / total if total > 0 else 0.0
    compound = (positive_total - negative_total) / max(total, 1.0)

    return SentimentScore(
        positive=min(positive, 1.0),
        negative=min(negative, 1.0),
        neutral=max(1.0 - (positive + negative), 0.0),
        compound=max(-1.0, min(1.0, compound)),
    )


def classify_sentiment(
    compound: float,
    positive: float,
    negative: float,
    cfg: SentimentConfig | None = None,
) -> SentimentLabel:
    """Mixed when both proportions are strong, otherwise by compound threshold."""
    cfg = cfg or get_config().analysis.sentiment
    if positive > cfg.mixed_threshold and negative > cfg.mixed_threshold:
        return SentimentLabel.MIXED
    if compound >= cfg.positive_threshold:
        return SentimentLabel.POSITIVE
    if compound <= cfg.negative_threshold:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.NEUTRAL


def get_emotional_tone(label: SentimentLabel, compound: float) -> str:
    if label is SentimentLabel.POSITIVE:
        if compound > 0.5:
            return "Very Positive - Highly enthusiastic and optimistic"
        if compound > 0.2:
            return "Positive - Satisfied and content"
        return "Somewhat Positive - Mildly favorable"
    if label is SentimentLabel.NEGATIVE:
        if compound < -0.5:
            return "Very Negative - Highly critical and upset"
        if compound < -0.2:
            return "Negative - Dissatisfied and concerned"
        return "Somewhat Negative - Slightly unfavorable"
    if label is SentimentLabel.MIXED:
        return "Mixed - Both positive and negative sentiments present"
    return "Neutral - Objective and impartial tone"


def extract_key_phrases(text: str, cfg: SentimentConfig | None = None) -> list[KeyPhrase]:
    """Fixed positive/negative phrase patterns found in the text."""
    cfg = cfg or get_config().analysis.sentiment
    haystack = text.lower().replace("'", "").replace("’", "")
    phrases = [
        KeyPhrase(p, SentimentLabel.POSITIVE, cfg.key_phrase_intensity)
        for p in POSITIVE_PHRASES
        if p in haystack
    ]
    phrases.extend(
        KeyPhrase(p, SentimentLabel.NEGATIVE, cfg.key_phrase_intensity)
        for p in NEGATIVE_PHRASES
        if p in haystack
    )
    return phrases


def analyze_sentiment(text: str) -> SentimentAnalysis:
    """
    Analyze the sentiment of a transcript and each of its sentences.

    Args:
        text: Transcript text

    Returns:
        SentimentAnalysis; compound 0, Neutral, confidence 0 for empty text
    """
    if not text or not text.strip():
        return empty_sentiment()

    cfg = get_config().analysis.sentiment
    overall = calculate_sentiment(text, cfg)
    label = classify_sentiment(overall.compound, overall.positive, overall.negative, cfg)

    sentences = []
    for sentence in split_sentences(text):
        score = calculate_sentiment(sentence, cfg)
        sentences.append(
            SentenceSentiment(
                text=sentence,
                sentiment=score,
                label=classify_sentiment(score.compound, score.positive, score.negative, cfg),
            )
        )

    words = tokenize_words(text)
    hits = sum(
        1
        for w in words
        if w in POSITIVE_WORDS or w in NEGATIVE_WORDS or is_negation(w)
    )
    confidence = min(hits / max(len(words), 1), 1.0)

    return SentimentAnalysis(
        overall=overall,
        sentiment=label,
        confidence=confidence,
        sentences=sentences,
        emotional_tone=get_emotional_tone(label, overall.compound),
        key_phrases=extract_key_phrases(text, cfg),
    )


def _transcripts(notes: Iterable[Note | str]) -> list[str]:
    return [n if isinstance(n, str) else n.transcription for n in notes]


def analyze_sentiment_trends(notes: Sequence[Note | str]) -> SentimentTrends:
    """
    Aggregate sentiment over a note collection.

    The most common label is the one with the highest count; ties go to the
    earliest label in Positive, Negative, Neutral, Mixed order.
    """
    distribution = {label.value: 0 for label in SentimentLabel}
    texts = _transcripts(notes)
    if not texts:
        return SentimentTrends(
            average_sentiment=0.0,
            positive_count=0,
            negative_count=0,
            neutral_count=0,
            mixed_count=0,
            overall_tone=NO_NOTES_CONTENT,
            most_common_sentiment=SentimentLabel.NEUTRAL,
            sentiment_distribution=distribution,
            average_confidence=0.0,
        )

    total_compound = 0.0
    total_confidence = 0.0
    for text in texts:
        analysis = analyze_sentiment(text)
        distribution[analysis.sentiment.value] += 1
        total_compound += analysis.overall.compound
        total_confidence += analysis.confidence

    average = total_compound / len(texts)
    most_common = SentimentLabel(max(distribution, key=distribution.__getitem__))

    return SentimentTrends(
        average_sentiment=average,
        positive_count=distribution[SentimentLabel.POSITIVE.value],
        negative_count=distribution[SentimentLabel.NEGATIVE.value],
        neutral_count=distribution[SentimentLabel.NEUTRAL.value],
        mixed_count=distribution[SentimentLabel.MIXED.value],
        overall_tone=get_emotional_tone(most_common, average),
        most_common_sentiment=most_common,
        sentiment_distribution=distribution,
        average_confidence=total_confidence / len(texts),
    )
