"""
Tag Extraction Module for NoteLens.

Generates up to ten tags for a transcript from four independent heuristics:

- Topic keywords (marketing, finance, meeting...) matched on word boundaries
- Named entities: runs of two or more capitalized words
- Proper nouns: capitalized words that are not stop words
- Dates: numeric dates, month-day expressions and weekday names

Tags are combined in that priority order and deduplicated case-insensitively.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from types import MappingProxyType
from typing import Any

from notelens.core.analysis.base import AnalysisModule
from notelens.core.models import Note
from notelens.core.utils.config import get_config
from notelens.core.utils.nlp_utils import Token, tokenize

# Topic label -> keywords, each matched with a word-boundary regex
COMMON_TOPICS = MappingProxyType(
    {
        "marketing": ("marketing", "campaign", "brand", "promotion", "seo", "content", "audience"),
        "finance": ("budget", "cost", "expense", "revenue", "financial", "money", "payment", "invoice"),
        "meeting": ("meeting", "discuss", "decision", "agenda", "action item", "follow-up"),
        "project": ("project", "deadline", "task", "milestone", "deliverable", "scope"),
        "client": ("client", "customer", "relationship", "feedback", "requirement"),
        "technology": ("tech", "software", "development", "api", "database", "server", "cloud"),
        "sales": ("sale", "deal", "lead", "pipeline", "opportunity", "close", "quota"),
        "hr": ("hiring", "recruitment", "performance", "employee", "team", "culture"),
    }
)

TOPIC_PATTERNS = MappingProxyType(
    {
        topic: re.compile(r"\b(?:" + "|".join(re.escape(k) for k in keywords) + r")\b")
        for topic, keywords in COMMON_TOPICS.items()
    }
)

_TOPIC_KEYWORDS = frozenset(k for keywords in COMMON_TOPICS.values() for k in keywords)

DATE_PATTERNS = (
    re.compile(r"\b\d{1,2}[/-]\d{1,2}[/-]\d{2,4}\b"),
    re.compile(
        r"\b(?:January|February|March|April|May|June|July|August|September|October|"
        r"November|December|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec)"
        r"\s+\d{1,2}(?:st|nd|rd|th)?\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)\b", re.IGNORECASE),
)

TAGGER_STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "from", "is", "am", "are", "was", "were", "be", "been",
        "being", "have", "has", "had", "do", "does", "did", "will", "would",
        "should", "could", "may", "might", "can", "must", "it", "this", "that",
        "these", "those", "i", "you", "he", "she", "we", "they",
    }
)

# Words that are capitalized only because they open a sentence
COMMON_SENTENCE_STARTERS = frozenset(
    {
        "so", "well", "then", "also", "yes", "yeah", "okay", "ok", "now", "just",
        "maybe", "hey", "hello", "hi", "thanks", "please", "let", "let's", "there",
        "here", "what", "when", "where", "why", "how", "who", "our", "my", "his",
        "her", "their", "its", "after", "before", "if", "as", "because",
        "although", "however", "first", "next", "finally", "today", "tomorrow",
        "yesterday", "um", "uh", "not", "no", "all", "some", "there's", "it's",
    }
)

_SENTENCE_BREAK = re.compile(r"[.!?\n]")


def _is_capitalized(token: Token) -> bool:
    return token.text[0].isupper()


def _sentence_initial_flags(text: str, tokens: Sequence[Token]) -> list[bool]:
    flags = []
    previous_end = 0
    for i, token in enumerate(tokens):
        gap = text[previous_end : token.start]
        flags.append(i == 0 or bool(_SENTENCE_BREAK.search(gap)))
        previous_end = token.end
    return flags


def _is_sentence_starter(word: str) -> bool:
    return (
        word in TAGGER_STOP_WORDS
        or word in COMMON_SENTENCE_STARTERS
        or word in _TOPIC_KEYWORDS
    )


def _unique(items: Iterable[str]) -> list[str]:
    seen: dict[str, str] = {}
    for item in items:
        seen.setdefault(item.lower(), item)
    return list(seen.values())


def extract_dates(text: str, limit: int | None = None) -> list[str]:
    limit = get_config().analysis.tagging.max_dates if limit is None else limit
    found = [m.group(0) for pattern in DATE_PATTERNS for m in pattern.finditer(text)]
    return _unique(found)[:limit]


def extract_proper_nouns(text: str, limit: int | None = None) -> list[str]:
    """
    Capitalized words longer than two characters that are not stop words.

    Sentence-initial words are skipped when they are common sentence openers.
    """
    limit = get_config().analysis.tagging.max_proper_nouns if limit is None else limit
    tokens = tokenize(text)
    nouns = []
    for token, initial in zip(tokens, _sentence_initial_flags(text, tokens)):
        if len(token.text) <= 2 or not _is_capitalized(token):
            continue
        if token.lower in TAGGER_STOP_WORDS:
            continue
        if initial and _is_sentence_starter(token.lower):
            continue
        nouns.append(token.text)
    return _unique(nouns)[:limit]


def extract_topics(text: str) -> list[str]:
    lowered = text.lower()
    return [topic for topic, pattern in TOPIC_PATTERNS.items() if pattern.search(lowered)]


def extract_entities(text: str, limit: int | None = None) -> list[str]:
    """
    Runs of two or more consecutive capitalized words, longer than three
    characters in total. A run ends at a lowercase word or a sentence break.
    """
    limit = get_config().analysis.tagging.max_entities if limit is None else limit
    tokens = tokenize(text)
    flags = _sentence_initial_flags(text, tokens)
    entities: list[str] = []
    run: list[str] = []

    def flush() -> None:
        if len(run) > 1:
            entity = " ".join(run)
            if len(entity) > 3:
                entities.append(entity)
        run.clear()

    for token, initial in zip(tokens, flags):
        if initial:
            flush()
        if not _is_capitalized(token):
            flush()
            continue
        if initial and _is_sentence_starter(token.lower):
            continue
        run.append(token.text)
    flush()

    return _unique(entities)[:limit]


def generate_tags(text: str, max_tags: int | None = None) -> list[str]:
    """
    Generate tags for a transcript.

    Args:
        text: Transcript text
        max_tags: Maximum number of tags (default from config)

    Returns:
        Topics, then entities, then proper nouns, then dates; deduplicated
        case-insensitively and capped
    """
    if not text or not text.strip():
        return []
    limit = get_config().analysis.tagging.max_tags if max_tags is None else max_tags
    combined = (
        extract_topics(text)
        + extract_entities(text)
        + extract_proper_nouns(text)
        + extract_dates(text)
    )
    return _unique(combined)[:limit]


def format_tag(tag: str) -> str:
    """Capitalize the first letter, lowercase the rest."""
    return tag[:1].upper() + tag[1:].lower()


def filter_by_tag(notes: Iterable[Note], tag: str) -> list[Note]:
    wanted = tag.lower()
    return [note for note in notes if any(t.lower() == wanted for t in note.tags)]


def get_all_tags(notes: Iterable[Note]) -> list[str]:
    """Unique lowercased tags in first-seen order."""
    tags: dict[str, None] = {}
    for note in notes:
        for tag in note.tags:
            tags[tag.lower()] = None
    return list(tags)


class TagExtractor(AnalysisModule):
    """Heuristic tags: topics, entities, proper nouns and dates."""

    name = "tags"

    def analyze(self, text: str, **kwargs: Any) -> list[str]:
        return generate_tags(text, **self.options(**kwargs))

    def empty_result(self) -> list[str]:
        return []
