"""
Concept-graph semantic search over notes (pure logic, no I/O).

Each query token is expanded through the concept graph. A note field scores
the best match over all expansions: 1.0 for a whole word, 0.7 for a
substring, 0.4 for a partial word overlap. Title, transcription and tag
scores are weighted and averaged over the query tokens.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from notelens.core.analysis.semantic_search.relationships import (
    CONCEPT_GROUPS,
    SEMANTIC_RELATIONSHIPS,
    get_semantic_expansions,
    tokenize_query,
)
from notelens.core.models import Note
from notelens.core.utils.config import get_config
from notelens.core.utils.nlp_utils import tokenize_words

EXACT_SCORE = 1.0
SUBSTRING_SCORE = 0.7
PARTIAL_SCORE = 0.4


class MatchType(str, Enum):
    SEMANTIC = "semantic"
    KEYWORD = "keyword"
    EXACT = "exact"

    @property
    def rank(self) -> int:
        return _MATCH_RANK[self]

    @classmethod
    def for_score(cls, score: float) -> "MatchType":
        if score >= EXACT_SCORE:
            return cls.EXACT
        if score >= SUBSTRING_SCORE:
            return cls.KEYWORD
        return cls.SEMANTIC


_MATCH_RANK = {MatchType.SEMANTIC: 0, MatchType.KEYWORD: 1, MatchType.EXACT: 2}


@dataclass
class SemanticSearchResult:
    note: Note
    relevance_score: float
    match_type: MatchType
    matched_terms: list[str] = field(default_factory=list)
    explanation: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "note_id": self.note.id,
            "title": self.note.title,
            "relevance_score": self.relevance_score,
            "match_type": self.match_type.value,
            "matched_terms": list(self.matched_terms),
            "explanation": self.explanation,
        }


class _Field:
    """A note field prepared once for repeated similarity checks."""

    __slots__ = ("lower", "words")

    def __init__(self, text: str):
        self.lower = (text or "").lower()
        self.words = frozenset(tokenize_words(text or ""))


def _partial_overlap(words: frozenset[str], expansion: str) -> bool:
    # A shorter word that stems the expansion ("finish" -> "finished")
    return any(
        len(w) >= 4 and w != expansion and expansion.startswith(w) for w in words
    )


def _field_similarity(prepared: _Field, token: str) -> float:
    best = 0.0
    for expansion in get_semantic_expansions(token):
        if expansion in prepared.words:
            return EXACT_SCORE
        if expansion in prepared.lower:
            best = max(best, SUBSTRING_SCORE)
        elif _partial_overlap(prepared.words, expansion):
            best = max(best, PARTIAL_SCORE)
    return best


def calculate_similarity(text: str, token: str) -> float:
    """
    Similarity of ``text`` to a query token in [0, 1].

    Args:
        text: Note field (title, transcription or a tag)
        token: Lowercased query token

    Returns:
        The best score over the token's semantic expansions
    """
    return _field_similarity(_Field(text), token)


def generate_explanation(matched_terms: Sequence[str]) -> str:
    if not matched_terms:
        return "Semantic match"
    return f"Matched: {', '.join(matched_terms[:2])}"


def _score_note(note: Note, tokens: list[str]) -> SemanticSearchResult:
    cfg = get_config().analysis.search
    total = 0.0
    matched: dict[str, None] = {}
    match_type = MatchType.SEMANTIC

    weighted_fields = [(cfg.title_weight, _Field(note.title))] if note.title else []
    weighted_fields.append((cfg.transcription_weight, _Field(note.transcription)))
    weighted_fields.extend((cfg.tag_weight, _Field(tag)) for tag in note.tags)

    for weight, prepared in weighted_fields:
        for token in tokens:
            score = _field_similarity(prepared, token)
            if score <= 0:
                continue
            total += score * weight
            matched[token] = None
            candidate = MatchType.for_score(score)
            # Escalate only
            if candidate.rank > match_type.rank:
                match_type = candidate

    terms = list(matched)
    return SemanticSearchResult(
        note=note,
        relevance_score=total / len(tokens) if tokens else 0.0,
        match_type=match_type,
        matched_terms=terms,
        explanation=generate_explanation(terms),
    )


def semantic_search(
    notes: Sequence[Note], query: str, threshold: float | None = None
) -> list[SemanticSearchResult]:
    """
    Rank notes by semantic relevance to a query.

    Args:
        notes: Notes to search
        query: Free-text query
        threshold: Minimum relevance (default from config)

    Returns:
        Results at or above the threshold, highest score first; ties keep the
        input order
    """
    if not query or not query.strip():
        return []
    cfg = get_config().analysis.search
    threshold = cfg.threshold if threshold is None else threshold
    tokens = tokenize_query(query, cfg.min_token_length)
    if not tokens:
        return []

    results = [_score_note(note, tokens) for note in notes]
    results = [r for r in results if r.relevance_score >= threshold]
    results.sort(key=lambda r: r.relevance_score, reverse=True)
    return results


def advanced_semantic_search(
    notes: Sequence[Note],
    query: str,
    tags: Sequence[str] | None = None,
    date_range: tuple[float, float] | None = None,
    favorite_only: bool = False,
    threshold: float | None = None,
) -> list[SemanticSearchResult]:
    """
    Filter notes, then run ``semantic_search``.

    Args:
        notes: Notes to search
        query: Free-text query
        tags: Keep notes carrying any of these tags (case-insensitive)
        date_range: Inclusive ``(from, to)`` bounds on ``created_at``
        favorite_only: Keep only favorite notes
        threshold: Minimum relevance (default from config)
    """
    filtered = list(notes)
    if tags:
        wanted = {t.lower() for t in tags}
        filtered = [n for n in filtered if any(t.lower() in wanted for t in n.tags)]
    if date_range is not None:
        start, end = date_range
        filtered = [n for n in filtered if start <= n.created_at <= end]
    if favorite_only:
        filtered = [n for n in filtered if n.is_favorite]
    return semantic_search(filtered, query, threshold)


def get_semantic_search_diagnostics() -> dict[str, Any]:
    return {
        "semantic_relationships_count": len(SEMANTIC_RELATIONSHIPS),
        "total_mappings": sum(len(terms) for terms in SEMANTIC_RELATIONSHIPS.values()),
        "categories": {
            name: sum(1 for key in keys if key in SEMANTIC_RELATIONSHIPS)
            for name, keys in CONCEPT_GROUPS.items()
        },
        "expansion_cache": get_semantic_expansions.cache_info()._asdict(),
    }
