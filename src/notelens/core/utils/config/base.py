"""Shared configuration constants."""

from __future__ import annotations

DEFAULT_LANGUAGE = "en"

# Filler-word categories in the order detection reports them
FILLER_CATEGORIES = ("verbal", "discourse", "verbal-tics", "phrase")

# Word cloud palette, one color per integer size bucket (1-5)
WORDCLOUD_COLORS = (
    "#3B82F6",  # blue
    "#8B5CF6",  # purple
    "#EC4899",  # pink
    "#F59E0B",  # amber
    "#EF4444",  # red
)

# Sentinel strings returned for empty input
NO_SUMMARY_CONTENT = "No content to summarize."
NO_SENTIMENT_CONTENT = "No content to analyze"
NO_NOTES_CONTENT = "No notes to analyze"

# Prefix for environment variable overrides
ENV_PREFIX = "NOTELENS_"
