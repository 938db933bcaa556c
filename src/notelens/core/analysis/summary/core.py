"""Core extractive summarization (pure logic, no I/O)."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any

from notelens.core.utils.config import NO_SUMMARY_CONTENT, SummaryConfig, get_config
from notelens.core.utils.logger import log_debug
from notelens.core.utils.nlp_utils import (
    round_half_up,
    split_sentences,
    tokenize,
    tokenize_words,
)
from notelens.core.utils.similarity_utils import normalize_scores, sentence_centrality

SUMMARY_STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "be", "been",
        "have", "has", "had", "do", "does", "did", "will", "would", "should",
        "could", "can", "may", "might", "must", "shall", "this", "that",
        "these", "those", "i", "you", "he", "she", "it", "we", "they",
        "what", "which", "who", "where", "when", "why", "how",
    }
)

# Words that signal a sentence carries a decision, problem or outcome
SIGNIFICANCE_KEYWORDS = MappingProxyType(
    {
        "important": 3.0,
        "critical": 3.0,
        "urgent": 3.0,
        "key": 2.0,
        "must": 2.0,
        "need": 2.0,
        "issue": 2.0,
        "problem": 2.0,
        "solution": 2.0,
        "result": 2.0,
        "decision": 2.0,
        "action": 2.0,
        "meeting": 1.5,
        "discussion": 1.5,
        "agreed": 2.0,
        "decided": 2.0,
        "completed": 1.5,
        "deadline": 2.0,
        "goal": 1.5,
        "budget": 1.5,
        "revenue": 1.5,
        "client": 1.5,
        "customer": 1.5,
    }
)

_NON_TOPIC_CAPITALS = frozenset({"The", "A", "An", "I"})


@dataclass
class SummaryInfo:
    summary: str
    sentences: list[str] = field(default_factory=list)
    word_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ReadabilityMetrics:
    word_count: int = 0
    sentence_count: int = 0
    average_word_length: float = 0.0
    average_sentence_length: float = 0.0
    reading_time_minutes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ComprehensiveSummary:
    summary: SummaryInfo
    keywords: list[str]
    topics: list[str]
    readability: ReadabilityMetrics
    multi_length: dict[str, str]

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "keywords": list(self.keywords),
            "topics": list(self.topics),
            "readability": self.readability.to_dict(),
            "multi_length": dict(self.multi_length),
        }


def empty_summary() -> SummaryInfo:
    return SummaryInfo(summary=NO_SUMMARY_CONTENT, sentences=[], word_count=0)


def _content_words(text: str) -> list[str]:
    return [w for w in tokenize_words(text) if w not in SUMMARY_STOP_WORDS]


def calculate_word_frequency(text: str) -> Counter:
    """Frequency of each non-stop word, lowercased."""
    return Counter(_content_words(text))


def score_sentence(
    sentence: str,
    word_frequency: Counter,
    position: int,
    total_sentences: int,
    cfg: SummaryConfig,
) -> float:
    """
    Score a sentence by word frequency plus significance keywords.

    The first and last sentences get a lead/conclusion boost; very short and
    very long sentences are penalized.
    """
    words = tokenize_words(sentence)
    score = sum(word_frequency.get(w, 0) for w in words)
    score += sum(SIGNIFICANCE_KEYWORDS.get(w, 0.0) for w in words)

    if position == 0 or position == total_sentences - 1:
        score *= cfg.lead_boost
    if len(words) < cfg.short_sentence_words:
        score *= cfg.short_penalty
    if len(words) > cfg.long_sentence_words:
        score *= cfg.long_penalty
    return float(score)


def rank_sentences(
    sentences: list[str], word_frequency: Counter, cfg: SummaryConfig, use_centrality: bool
) -> list[float]:
    """Combined score per sentence, in document order."""
    total = len(sentences)
    frequency_scores = [
        score_sentence(s, word_frequency, i, total, cfg) for i, s in enumerate(sentences)
    ]
    if not use_centrality:
        return frequency_scores

    if total > cfg.max_centrality_sentences:
        log_debug(
            "SUMMARY",
            f"Skipping centrality for {total} sentences "
            f"(limit {cfg.max_centrality_sentences})",
        )
        return frequency_scores

    centrality = sentence_centrality(sentences, _content_words)
    combined = (
        cfg.frequency_weight * normalize_scores(frequency_scores)
        + cfg.centrality_weight * normalize_scores(centrality)
    )
    return [float(score) for score in combined]


def generate_summary(
    text: str,
    target_sentences: int | None = None,
    separator: str | None = None,
    use_centrality: bool | None = None,
) -> SummaryInfo:
    """
    Generate an extractive summary of ``target_sentences`` sentences.

    Sentences are selected by score and emitted in their original order. When
    the text has no more sentences than requested, all of them are returned.

    Args:
        text: Transcript text
        target_sentences: Sentences to keep (default from config)
        separator: String joining the selected sentences (default from config)
        use_centrality: Blend in sentence centrality (default from config)

    Returns:
        SummaryInfo; the "No content to summarize." marker for empty text
    """
    cfg = get_config().analysis.summary
    target = max(1, int(target_sentences if target_sentences is not None else cfg.target_sentences))
    joiner = cfg.separator if separator is None else separator
    centrality = cfg.use_centrality if use_centrality is None else use_centrality

    sentences = split_sentences(text)
    if not sentences:
        return empty_summary()

    word_count = len(tokenize(text))
    if len(sentences) <= target:
        return SummaryInfo(
            summary=joiner.join(sentences), sentences=sentences, word_count=word_count
        )

    scores = rank_sentences(sentences, calculate_word_frequency(text), cfg, centrality)
    # Stable sort: on equal scores the earlier sentence wins
    ranked = sorted(range(len(sentences)), key=lambda i: -scores[i])
    selected = [sentences[i] for i in sorted(ranked[:target])]
    return SummaryInfo(
        summary=joiner.join(selected), sentences=selected, word_count=word_count
    )


def generate_multi_length_summaries(text: str) -> dict[str, str]:
    """Brief (1), short (2) and medium (3) sentence summaries."""
    return {
        "brief": generate_summary(text, 1).summary,
        "short": generate_summary(text, 2).summary,
        "medium": generate_summary(text, 3).summary,
    }


def extract_keywords(text: str, limit: int = 5) -> list[str]:
    """Most frequent non-stop words; ties keep first-seen order."""
    return [word for word, _ in calculate_word_frequency(text).most_common(limit)]


def extract_main_topics(text: str) -> list[str]:
    """
    Strong significance keywords present in the text, followed by up to three
    capitalized words. At most five topics.
    """
    words = set(tokenize_words(text))
    topics: dict[str, None] = {}
    for keyword, significance in SIGNIFICANCE_KEYWORDS.items():
        if significance >= 2 and keyword in words:
            topics[keyword] = None

    capitalized: dict[str, None] = {}
    for token in tokenize(text):
        if token.text[0].isupper() and token.text not in _NON_TOPIC_CAPITALS:
            capitalized[token.lower] = None
    for word in list(capitalized)[:3]:
        topics[word] = None

    return list(topics)[:5]


def get_readability_metrics(text: str) -> ReadabilityMetrics:
    words = tokenize_words(text)
    sentences = split_sentences(text)
    cfg = get_config().analysis.summary

    word_count = len(words)
    sentence_count = len(sentences)
    average_word_length = sum(len(w) for w in words) / word_count if word_count else 0.0
    average_sentence_length = word_count / sentence_count if sentence_count else 0.0

    return ReadabilityMetrics(
        word_count=word_count,
        sentence_count=sentence_count,
        average_word_length=round_half_up(average_word_length, 2),
        average_sentence_length=round_half_up(average_sentence_length, 2),
        reading_time_minutes=math.ceil(word_count / cfg.words_per_minute),
    )


def generate_comprehensive_summary(text: str) -> ComprehensiveSummary:
    return ComprehensiveSummary(
        summary=generate_summary(text, 2),
        keywords=extract_keywords(text),
        topics=extract_main_topics(text),
        readability=get_readability_metrics(text),
        multi_length=generate_multi_length_summaries(text),
    )


def get_summary_diagnostics() -> dict[str, Any]:
    cfg = get_config().analysis.summary
    return {
        "stop_words_count": len(SUMMARY_STOP_WORDS),
        "significance_keywords_count": len(SIGNIFICANCE_KEYWORDS),
        "default_target_sentences": cfg.target_sentences,
        "use_centrality": cfg.use_centrality,
        "max_centrality_sentences": cfg.max_centrality_sentences,
    }
