"""Semantic search package: concept graph, scored search and inverted index."""

from notelens.core.analysis.semantic_search.core import (
    MatchType,
    SemanticSearchResult,
    advanced_semantic_search,
    calculate_similarity,
    generate_explanation,
    get_semantic_search_diagnostics,
    semantic_search,
)
from notelens.core.analysis.semantic_search.index import (
    SemanticIndex,
    SemanticIndexStore,
    build_semantic_index,
    fast_semantic_search,
)
from notelens.core.analysis.semantic_search.relationships import (
    SEMANTIC_RELATIONSHIPS,
    get_semantic_expansions,
    get_suggested_search_terms,
    tokenize_query,
)

__all__ = [
    "SEMANTIC_RELATIONSHIPS",
    "MatchType",
    "SemanticIndex",
    "SemanticIndexStore",
    "SemanticSearchResult",
    "advanced_semantic_search",
    "build_semantic_index",
    "calculate_similarity",
    "fast_semantic_search",
    "generate_explanation",
    "get_semantic_expansions",
    "get_semantic_search_diagnostics",
    "get_suggested_search_terms",
    "semantic_search",
    "tokenize_query",
]
