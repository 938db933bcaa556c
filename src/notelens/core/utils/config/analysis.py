"""Analysis configuration classes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .base import DEFAULT_LANGUAGE, FILLER_CATEGORIES


@dataclass
class SummaryConfig:
    """Configuration for extractive summarization."""

    target_sentences: int = 2
    separator: str = " "

    # Centrality is O(sentences^2); skipped above max_centrality_sentences
    use_centrality: bool = True
    frequency_weight: float = 0.55
    centrality_weight: float = 0.45
    max_centrality_sentences: int = 300

    lead_boost: float = 1.15
    short_penalty: float = 0.7
    long_penalty: float = 0.85
    short_sentence_words: int = 5
    long_sentence_words: int = 30

    words_per_minute: int = 200

    def validate(self) -> None:
        if self.target_sentences < 1:
            raise ValueError("summary.target_sentences must be >= 1")
        if self.max_centrality_sentences < 0:
            raise ValueError("summary.max_centrality_sentences must be >= 0")
        if self.words_per_minute < 1:
            raise ValueError("summary.words_per_minute must be >= 1")


@dataclass
class SentimentConfig:
    """Configuration for lexicon sentiment scoring."""

    positive_threshold: float = 0.05
    negative_threshold: float = -0.05
    mixed_threshold: float = 0.3
    negation_factor: float = 0.5
    key_phrase_intensity: float = 0.8

    def validate(self) -> None:
        if self.negative_threshold > self.positive_threshold:
            raise ValueError(
                "sentiment.negative_threshold must not exceed positive_threshold"
            )


@dataclass
class FillerConfig:
    enabled_categories: list[str] = field(
        default_factory=lambda: list(FILLER_CATEGORIES)
    )

    def validate(self) -> None:
        unknown = [c for c in self.enabled_categories if c not in FILLER_CATEGORIES]
        if unknown:
            raise ValueError(f"fillers.enabled_categories: unknown {unknown}")


@dataclass
class WordCloudConfig:
    max_words: int = 30
    default_language: str = DEFAULT_LANGUAGE
    min_word_length_default: int = 3
    min_word_length_other: int = 1
    min_content_default: int = 20
    min_content_other: int = 10

    def validate(self) -> None:
        if self.max_words < 1:
            raise ValueError("wordcloud.max_words must be >= 1")


@dataclass
class SearchConfig:
    """Configuration for concept-graph semantic search."""

    threshold: float = 0.3
    min_token_length: int = 3
    index_transcript_tokens: int = 50
    title_weight: float = 1.0
    transcription_weight: float = 0.8
    tag_weight: float = 1.2

    def validate(self) -> None:
        if self.threshold < 0:
            raise ValueError("search.threshold must be >= 0")


@dataclass
class TaggingConfig:
    max_tags: int = 10
    max_dates: int = 5
    max_proper_nouns: int = 5
    max_entities: int = 3

    def validate(self) -> None:
        if self.max_tags < 0:
            raise ValueError("tagging.max_tags must be >= 0")


@dataclass
class VocabularyConfig:
    top_n: int = 10
    rare_max_frequency: int = 2
    richness_trend_threshold: float = 0.02
    sentence_length_trend_threshold: float = 1.0


@dataclass
class AnalysisConfig:
    """
    Configuration for all analysis modules.

    Each analyzer reads its own section; explicit keyword arguments passed to
    an analyzer function always win over these values.
    """

    summary: SummaryConfig = field(default_factory=SummaryConfig)
    sentiment: SentimentConfig = field(default_factory=SentimentConfig)
    fillers: FillerConfig = field(default_factory=FillerConfig)
    wordcloud: WordCloudConfig = field(default_factory=WordCloudConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    tagging: TaggingConfig = field(default_factory=TaggingConfig)
    vocabulary: VocabularyConfig = field(default_factory=VocabularyConfig)

    # Modules run by `notelens analyze` when --modules is not given
    default_modules: list[str] = field(
        default_factory=lambda: [
            "summary",
            "sentiment",
            "fillers",
            "wordcloud",
            "tags",
            "vocabulary",
        ]
    )
