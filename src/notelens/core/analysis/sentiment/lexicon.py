"""Sentiment lexicons. Read-only tables; intensities are in [0, 1]."""

from types import MappingProxyType

POSITIVE_WORDS = MappingProxyType(
    {
        "good": 0.7,
        "great": 0.9,
        "excellent": 0.95,
        "amazing": 0.95,
        "wonderful": 0.9,
        "fantastic": 0.95,
        "brilliant": 0.9,
        "awesome": 0.95,
        "perfect": 0.95,
        "beautiful": 0.85,
        "love": 0.9,
        "happy": 0.85,
        "glad": 0.8,
        "pleased": 0.8,
        "satisfied": 0.75,
        "proud": 0.85,
        "confident": 0.75,
        "successful": 0.85,
        "winning": 0.85,
        "accomplished": 0.85,
        "thrilled": 0.9,
        "delighted": 0.9,
        "grateful": 0.85,
        "appreciate": 0.8,
        "inspired": 0.85,
        "motivated": 0.8,
        "excited": 0.85,
        "optimistic": 0.8,
        "positive": 0.75,
        "improvement": 0.7,
        "better": 0.7,
        "best": 0.85,
        "success": 0.85,
        "achieve": 0.75,
        "victory": 0.85,
        "triumph": 0.85,
        "well": 0.6,
        "nice": 0.7,
        "cool": 0.7,
        "enjoyed": 0.8,
        "fun": 0.75,
        "interesting": 0.65,
        "fascinated": 0.8,
    }
)

NEGATIVE_WORDS = MappingProxyType(
    {
        "bad": 0.7,
        "terrible": 0.95,
        "horrible": 0.95,
        "awful": 0.95,
        "hate": 0.9,
        "angry": 0.85,
        "upset": 0.8,
        "sad": 0.85,
        "depressed": 0.9,
        "disappointed": 0.8,
        "frustrated": 0.8,
        "annoyed": 0.7,
        "bored": 0.7,
        "tired": 0.65,
        "stressed": 0.8,
        "anxious": 0.8,
        "worried": 0.8,
        "afraid": 0.85,
        "scared": 0.85,
        "difficult": 0.65,
        "problem": 0.7,
        "issue": 0.65,
        "failed": 0.85,
        "failure": 0.85,
        "loss": 0.8,
        "lost": 0.75,
        "worst": 0.9,
        "wrong": 0.7,
        "mistake": 0.65,
        "error": 0.65,
        "bug": 0.6,
        "pain": 0.8,
        "hurt": 0.75,
        "sick": 0.75,
        "ill": 0.7,
        "negative": 0.75,
        "useless": 0.85,
        "worthless": 0.85,
        "stupid": 0.85,
        "dumb": 0.85,
        "ridiculous": 0.8,
        "pathetic": 0.85,
        "disgusting": 0.9,
        "disgusted": 0.85,
        "furious": 0.9,
        "enraged": 0.95,
        "devastated": 0.9,
        "miserable": 0.9,
        "dreadful": 0.9,
    }
)

INTENSIFIERS = MappingProxyType(
    {
        "very": 1.2,
        "extremely": 1.3,
        "so": 1.2,
        "really": 1.2,
        "quite": 1.1,
        "absolutely": 1.3,
        "totally": 1.3,
        "completely": 1.3,
        "utterly": 1.3,
    }
)

NEGATIONS = frozenset(
    {"not", "no", "never", "neither", "nobody", "nothing", "hardly", "barely", "rarely"}
)

# Matched against lowercased text with apostrophes removed ("can't" -> "cant")
POSITIVE_PHRASES = (
    "very good",
    "really great",
    "so good",
    "so great",
    "absolutely love",
    "really love",
    "great job",
    "well done",
    "impressed with",
    "looking forward",
    "cant wait",
    "excited about",
    "look forward",
    "good news",
    "great idea",
    "brilliant idea",
    "brilliant work",
)

NEGATIVE_PHRASES = (
    "very bad",
    "really bad",
    "so bad",
    "absolutely hate",
    "hate it",
    "dont like",
    "not good",
    "not great",
    "bad news",
    "bad luck",
    "terrible idea",
    "awful idea",
    "not happy",
    "really upset",
    "very upset",
    "extremely disappointed",
    "totally disappointed",
    "never again",
    "wasted time",
)


def is_negation(word: str) -> bool:
    """Negation words plus ``n't`` contractions (don't, isn't, can't...)."""
    return word in NEGATIONS or word.endswith("n't") or word.endswith("n’t")
