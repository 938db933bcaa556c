"""
Concept graph for semantic search.

Each key maps to related terms. Expansion is symmetric: a token expands to
itself, its related terms and every key that lists it.
"""

from __future__ import annotations

import re
from functools import lru_cache
from types import MappingProxyType

SEMANTIC_RELATIONSHIPS = MappingProxyType(
    {
        # Financial concepts
        "budget": ("finance", "money", "cost", "expense", "spending", "financial", "invest", "capital", "funds"),
        "finance": ("budget", "money", "cost", "expense", "spending", "invest", "capital", "profit", "revenue"),
        "expense": ("budget", "cost", "spending", "money", "finance", "bill", "payment", "invoice"),
        "revenue": ("finance", "money", "income", "profit", "sales", "business", "earnings"),
        "profit": ("revenue", "finance", "business", "income", "success", "earnings"),
        "cost": ("expense", "budget", "money", "spending", "finance", "price", "payment"),
        "money": ("budget", "finance", "expense", "cost", "spending", "payment", "income", "wealth"),
        "salary": ("payment", "income", "money", "compensation", "wage", "earnings"),
        "invoice": ("payment", "bill", "expense", "money", "cost"),
        # Meeting concepts
        "meeting": ("discussion", "conversation", "talk", "conference", "presentation", "call", "gathering", "sync"),
        "discussion": ("meeting", "conversation", "talk", "debate", "topic", "dialogue"),
        "presentation": ("meeting", "demo", "talk", "pitch", "showcase", "show"),
        "call": ("meeting", "conversation", "discussion", "sync", "conference", "communication"),
        "sync": ("meeting", "call", "check-in", "update", "discussion", "sync-up"),
        # Project concepts
        "project": ("task", "work", "delivery", "deadline", "milestone", "objective", "goal"),
        "task": ("project", "work", "assignment", "responsibility", "to-do", "item"),
        "deadline": ("project", "timeline", "date", "schedule", "due", "time"),
        "milestone": ("project", "achievement", "goal", "target", "checkpoint"),
        "goal": ("objective", "target", "aim", "purpose", "milestone", "outcome"),
        # Client concepts
        "client": ("customer", "customer-name", "account", "business", "contract", "relationship"),
        "customer": ("client", "user", "account", "buyer", "business"),
        # Technology concepts
        "technology": ("tech", "software", "development", "code", "technical", "system", "infrastructure"),
        "development": ("technology", "coding", "engineering", "software", "building", "creation"),
        "bug": ("issue", "problem", "error", "fix", "development", "technical"),
        "feature": ("development", "functionality", "capability", "enhancement", "build"),
        # Marketing and sales concepts
        "marketing": ("campaign", "promotion", "advertising", "brand", "strategy", "outreach", "engagement"),
        "campaign": ("marketing", "promotion", "strategy", "initiative", "launch", "effort"),
        "sales": ("revenue", "business", "customer", "closing", "deal", "opportunity", "pipeline"),
        "deal": ("sales", "business", "closing", "opportunity", "contract", "agreement"),
        # Action and priority concepts
        "important": ("critical", "urgent", "priority", "key", "essential", "significant"),
        "urgent": ("important", "critical", "priority", "rush", "emergency", "immediate"),
        "follow-up": ("action", "task", "to-do", "reminder", "next-step"),
        "decision": ("choice", "outcome", "result", "conclusion", "direction"),
        # Time concepts
        "today": ("date", "current", "now", "immediate", "schedule"),
        "tomorrow": ("date", "schedule", "upcoming", "future"),
        "week": ("time", "schedule", "duration", "period"),
        "month": ("time", "quarter", "period", "duration", "schedule"),
        # Status concepts
        "complete": ("done", "finished", "closed", "resolved", "success"),
        "done": ("complete", "finished", "success", "achieved"),
        "pending": ("waiting", "todo", "upcoming", "scheduled", "in-progress"),
        "in-progress": ("active", "ongoing", "working", "status", "pending"),
    }
)

# Key groups reported by diagnostics
CONCEPT_GROUPS = MappingProxyType(
    {
        "financial": ("budget", "finance", "expense", "revenue", "profit", "cost", "money"),
        "meetings": ("meeting", "discussion", "presentation", "call", "sync"),
        "projects": ("project", "task", "deadline", "milestone", "goal"),
        "technology": ("technology", "development", "bug", "feature"),
    }
)

_QUERY_STRIP = re.compile(r"[^\w\s-]")


def tokenize_query(query: str, min_length: int = 3) -> list[str]:
    """Lowercase, drop punctuation other than hyphens, keep words of ``min_length``+."""
    if not query:
        return []
    cleaned = _QUERY_STRIP.sub("", query.lower())
    return [token for token in cleaned.split() if len(token) >= min_length]


@lru_cache(maxsize=2048)
def get_semantic_expansions(token: str) -> tuple[str, ...]:
    """
    The token, its related terms, then every key whose terms include it.

    Order is preserved and duplicates dropped.
    """
    expansions: dict[str, None] = {token: None}
    for term in SEMANTIC_RELATIONSHIPS.get(token, ()):
        expansions[term] = None
    for key, terms in SEMANTIC_RELATIONSHIPS.items():
        if token in terms:
            expansions[key] = None
    return tuple(expansions)


def get_suggested_search_terms(query: str) -> list[str]:
    """Up to three related terms per query token, five overall."""
    suggestions: dict[str, None] = {}
    for token in tokenize_query(query):
        for term in get_semantic_expansions(token)[1:4]:
            suggestions[term] = None
    return list(suggestions)[:5]
