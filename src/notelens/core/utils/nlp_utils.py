"""
Tokenization and normalization shared by every NoteLens analyzer.

Words are maximal runs of Unicode letters, combining marks, apostrophes and
hyphens that contain at least one letter; everything else is a boundary.
Combining marks are word-internal so Devanagari and other scripts with
vowel signs tokenize as whole words. Leading and trailing apostrophes or
hyphens are trimmed from a token (``'quoted'`` -> ``quoted``).

Sentences are split on ``.``, ``!``, ``?`` and newlines, trimmed, with empty
pieces discarded.
"""

from __future__ import annotations

import math
import re
import unicodedata
from dataclasses import dataclass
from types import MappingProxyType

WORD_JOINERS = frozenset("'’-")

_SENTENCE_SPLIT = re.compile(r"[.!?\n]+")


@dataclass(frozen=True)
class Token:
    """A word with its ``[start, end)`` character offsets in the source text."""

    text: str
    start: int
    end: int

    @property
    def lower(self) -> str:
        return self.text.lower()


# --- Stop words ---

STOP_WORDS_EN = frozenset(
    {
        "a", "about", "above", "after", "again", "against", "all", "am", "an",
        "and", "any", "are", "as", "at", "be", "because", "been", "before",
        "being", "below", "between", "both", "but", "by", "can", "could", "did",
        "do", "does", "doing", "down", "during", "each", "few", "for", "from",
        "further", "had", "has", "have", "having", "he", "her", "here", "hers",
        "herself", "him", "himself", "his", "how", "i", "if", "in", "into", "is",
        "it", "its", "itself", "just", "me", "might", "more", "most", "must",
        "my", "myself", "no", "nor", "not", "of", "off", "on", "once", "only",
        "or", "other", "our", "ours", "ourselves", "out", "over", "own", "same",
        "should", "so", "some", "such", "than", "that", "the", "their", "theirs",
        "them", "themselves", "then", "there", "these", "they", "this", "those",
        "through", "to", "too", "under", "until", "up", "very", "was", "we",
        "were", "what", "when", "where", "which", "while", "who", "whom", "why",
        "will", "with", "you", "your", "yours", "yourself", "yourselves",
        # Spoken-transcript noise
        "um", "uh", "hmm", "like", "okay", "really", "basically", "actually",
        "well", "right", "though", "thing", "things", "said", "say", "says",
        "etc", "mr", "mrs",
    }
)

STOP_WORDS_HI = frozenset(
    {
        "है", "हैं", "और", "मैं", "हम", "यह", "वह", "के", "का", "की", "में",
        "से", "पर", "कि", "को", "ये", "जो",
    }
)

_STOP_WORDS_BY_LANGUAGE = MappingProxyType(
    {
        "en": STOP_WORDS_EN,
        "hi": STOP_WORDS_HI,
    }
)


def get_stopwords(language: str = "en") -> frozenset[str]:
    """
    Return the stop-word table for ``language``.

    Unsupported languages get an empty set, meaning every word counts.
    """
    return _STOP_WORDS_BY_LANGUAGE.get((language or "").lower(), frozenset())


# --- Character classes ---


def is_letter(ch: str) -> bool:
    return unicodedata.category(ch).startswith("L")


def is_word_char(ch: str) -> bool:
    """True for letters, combining marks, apostrophes and hyphens."""
    if ch in WORD_JOINERS:
        return True
    category = unicodedata.category(ch)
    return category.startswith("L") or category.startswith("M")


def strip_non_word_chars(word: str) -> str:
    """Remove every character that is not a letter, mark, apostrophe or hyphen."""
    return "".join(ch for ch in word if is_word_char(ch))


# --- Tokenization ---


def tokenize(text: str) -> list[Token]:
    """
    Split text into word tokens with character offsets.

    Args:
        text: Input text (may be empty)

    Returns:
        Tokens in document order; offsets index into ``text``
    """
    tokens: list[Token] = []
    if not text:
        return tokens

    length = len(text)
    i = 0
    while i < length:
        if not is_word_char(text[i]):
            i += 1
            continue
        start = i
        while i < length and is_word_char(text[i]):
            i += 1
        end = i
        # Trim joiners at the edges of the run
        while start < end and text[start] in WORD_JOINERS:
            start += 1
        while end > start and text[end - 1] in WORD_JOINERS:
            end -= 1
        if start < end and any(is_letter(ch) for ch in text[start:end]):
            tokens.append(Token(text[start:end], start, end))
    return tokens


def tokenize_words(text: str, lowercase: bool = True) -> list[str]:
    """Return the word strings of ``tokenize(text)``."""
    if lowercase:
        return [token.lower for token in tokenize(text)]
    return [token.text for token in tokenize(text)]


def split_sentences(text: str) -> list[str]:
    """Split on ``.``, ``!``, ``?`` or newline; trim and drop empty pieces."""
    if not text:
        return []
    return [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def count_words(text: str) -> int:
    """Whitespace-delimited word count."""
    return len(text.split()) if text else 0


def filter_stopwords(words: list[str], language: str = "en") -> list[str]:
    stopwords = get_stopwords(language)
    return [w for w in words if w not in stopwords]


def has_meaningful_content(text: str, min_words: int = 1, language: str = "en") -> bool:
    """
    Check whether text has at least ``min_words`` non-stop-word tokens.

    Args:
        text: Input text
        min_words: Minimum number of meaningful words
        language: Stop-word table to apply

    Returns:
        True if the text carries enough content to analyze
    """
    if not text or not text.strip():
        return False
    return len(filter_stopwords(tokenize_words(text), language)) >= min_words


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with halves going up (``1.25`` -> ``1.3``).

    The built-in ``round`` sends exact halves to the even neighbour instead.
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
