"""Filler-word lexicons."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class FillerCategory(str, Enum):
    VERBAL = "verbal"
    DISCOURSE = "discourse"
    VERBAL_TICS = "verbal-tics"
    PHRASE = "phrase"


CATEGORY_DESCRIPTIONS = MappingProxyType(
    {
        FillerCategory.VERBAL: "Verbal Hesitation",
        FillerCategory.DISCOURSE: "Discourse Marker",
        FillerCategory.VERBAL_TICS: "Verbal Tic",
        FillerCategory.PHRASE: "Filler Phrase",
    }
)

# Display colors per category: background, text, border
CATEGORY_COLORS = MappingProxyType(
    {
        FillerCategory.VERBAL: ("#7c2d12", "#fed7aa", "#ea580c"),
        FillerCategory.DISCOURSE: ("#3b0764", "#e9d5ff", "#c084fc"),
        FillerCategory.VERBAL_TICS: ("#164e63", "#cffafe", "#06b6d4"),
        FillerCategory.PHRASE: ("#7c3aed", "#ede9fe", "#a78bfa"),
    }
)

VERBAL_FILLERS = (
    "um", "uh", "err", "erm", "hmm", "huh", "ah", "oh", "aah", "ooh", "eeh", "agh",
)

DISCOURSE_FILLERS = (
    "like", "basically", "literally", "actually", "honestly", "so", "well",
    "right", "okay",
)

VERBAL_TICS = ("anyway", "anyhow")

# Single-word lookup: lowercase word -> category
SINGLE_WORD_FILLERS = MappingProxyType(
    {
        **{w: FillerCategory.VERBAL for w in VERBAL_FILLERS},
        **{w: FillerCategory.DISCOURSE for w in DISCOURSE_FILLERS},
        **{w: FillerCategory.VERBAL_TICS for w in VERBAL_TICS},
    }
)

# Multi-word fillers, longest first so the longer phrase wins at a shared start
FILLER_PHRASES = tuple(
    sorted(
        {
            "you know what i mean",
            "you know what",
            "i think that",
            "i feel like",
            "i mean like",
            "sort of like",
            "kind of like",
            "at the end of the day",
            "for whatever reason",
            "you know",
            "i mean",
            "i think",
            "i feel",
            "sort of",
            "kind of",
            "for sure",
            "in terms of",
        },
        key=lambda p: (-len(p), p),
    )
)


def get_category_description(category: FillerCategory | str) -> str:
    try:
        return CATEGORY_DESCRIPTIONS[FillerCategory(category)]
    except ValueError:
        return "Filler Word"
