"""
Inverted index for semantic search.

``build_semantic_index`` maps every expansion of a note's title, tag and
leading transcript tokens to the ids of the notes containing them. The index
is immutable; ``SemanticIndexStore`` rebuilds it under a lock and publishes
the new snapshot with a single reference assignment, so readers never see a
half-built index and never block.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from notelens.core.analysis.semantic_search.core import MatchType, SemanticSearchResult
from notelens.core.analysis.semantic_search.relationships import (
    get_semantic_expansions,
    tokenize_query,
)
from notelens.core.models import Note
from notelens.core.utils.config import get_config
from notelens.core.utils.logger import log_index_rebuild


@dataclass(frozen=True)
class SemanticIndex:
    token_to_notes: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    note_ids: frozenset[str] = frozenset()

    def __len__(self) -> int:
        return len(self.token_to_notes)

    def lookup(self, token: str) -> frozenset[str]:
        return self.token_to_notes.get(token, frozenset())


def _note_tokens(note: Note, transcript_tokens: int, min_length: int) -> list[str]:
    tokens = tokenize_query(note.title, min_length) if note.title else []
    tokens.extend(tokenize_query(note.transcription, min_length)[:transcript_tokens])
    for tag in note.tags:
        tokens.extend(tokenize_query(tag, min_length))
    return tokens


def build_semantic_index(notes: Iterable[Note]) -> SemanticIndex:
    """
    Build an immutable inverted index over ``notes``.

    Only the first ``index_transcript_tokens`` transcript tokens are indexed.
    """
    cfg = get_config().analysis.search
    postings: dict[str, set[str]] = {}
    note_ids: set[str] = set()

    for note in notes:
        note_ids.add(note.id)
        for token in _note_tokens(note, cfg.index_transcript_tokens, cfg.min_token_length):
            for expansion in get_semantic_expansions(token):
                postings.setdefault(expansion, set()).add(note.id)

    return SemanticIndex(
        token_to_notes=MappingProxyType({k: frozenset(v) for k, v in postings.items()}),
        note_ids=frozenset(note_ids),
    )


def fast_semantic_search(
    notes: Sequence[Note], query: str, index: SemanticIndex
) -> list[SemanticSearchResult]:
    """
    Rank notes by index hits per query token.

    Relevance is the number of expansion hits divided by the query token
    count. Notes missing from ``notes`` are skipped.
    """
    cfg = get_config().analysis.search
    tokens = tokenize_query(query, cfg.min_token_length)
    if not tokens:
        return []

    hits: dict[str, int] = {}
    for token in tokens:
        for expansion in get_semantic_expansions(token):
            for note_id in index.lookup(expansion):
                hits[note_id] = hits.get(note_id, 0) + 1

    by_id = {note.id: note for note in notes}
    results = [
        SemanticSearchResult(
            note=by_id[note_id],
            relevance_score=count / len(tokens),
            match_type=MatchType.SEMANTIC,
            matched_terms=[],
            explanation=f"Semantic match (frequency: {count})",
        )
        for note_id, count in hits.items()
        if note_id in by_id
    ]
    # Posting sets are unordered; sort by score, then by note order
    order = {note.id: i for i, note in enumerate(notes)}
    results.sort(key=lambda r: (-r.relevance_score, order[r.note.id]))
    return results


class SemanticIndexStore:
    """
    Holds the current notes and their index as one immutable snapshot.

    ``rebuild`` calls are serialized by a lock. ``search`` reads the snapshot
    reference once and never takes the lock.
    """

    def __init__(self, notes: Iterable[Note] = ()):
        self._lock = threading.Lock()
        notes = tuple(notes)
        self._snapshot: tuple[tuple[Note, ...], SemanticIndex] = (
            notes,
            build_semantic_index(notes),
        )

    @property
    def notes(self) -> tuple[Note, ...]:
        return self._snapshot[0]

    @property
    def index(self) -> SemanticIndex:
        return self._snapshot[1]

    def rebuild(self, notes: Iterable[Note]) -> SemanticIndex:
        """Rebuild the index for a changed note collection and publish it."""
        with self._lock:
            start = time.time()
            notes = tuple(notes)
            index = build_semantic_index(notes)
            self._snapshot = (notes, index)
            log_index_rebuild(len(notes), len(index), time.time() - start)
            return index

    def search(self, query: str) -> list[SemanticSearchResult]:
        notes, index = self._snapshot
        return fast_semantic_search(notes, query, index)
